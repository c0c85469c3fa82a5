"""Tests for the bundled scenes."""

import random

from spheretracer.geometry.sphere import Sphere
from spheretracer.materials.dielectric import Dielectric
from spheretracer.scenes import SCENES, random_spheres, single_sphere, three_spheres


class TestScenes:
    def test_three_spheres_layout(self):
        world = three_spheres()
        assert len(world) == 5
        assert all(isinstance(obj, Sphere) for obj in world)

    def test_hollow_glass_shares_material(self):
        world = three_spheres()
        outer, inner = world.objects[2], world.objects[3]
        assert isinstance(outer.material, Dielectric)
        assert outer.material is inner.material
        assert inner.radius < 0

    def test_single_sphere(self):
        (sphere,) = single_sphere().objects
        assert sphere.radius == 0.5
        assert sphere.center.z == -1.0

    def test_random_spheres_is_seeded(self):
        a = [s.center for s in random_spheres(random.Random(9))]
        b = [s.center for s in random_spheres(random.Random(9))]
        assert a == b
        assert len(a) > 10

    def test_registry(self):
        assert set(SCENES) == {"three_spheres", "single_sphere", "random_spheres"}

    def test_verbose_logs_to_stderr(self, capsys):
        three_spheres(verbose=True)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "=== Creating World ===" in captured.err
        assert "hollow glass sphere" in captured.err
