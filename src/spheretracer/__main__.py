from spheretracer.main import main

raise SystemExit(main())
