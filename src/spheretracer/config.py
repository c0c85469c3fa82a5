"""
Default render settings.
"""

# Image and camera
ASPECT_RATIO = 16.0 / 9.0
IMAGE_WIDTH = 400
VIEWPORT_HEIGHT = 2.0
FOCAL_LENGTH = 1.0

# Integrator
SAMPLES_PER_PIXEL = 100
MAX_DEPTH = 50
T_MIN = 0.001  # Offset that keeps bounced rays off the surface they left

# Quality presets selectable from the command line
QUALITY_LEVELS = {
    "draft": {"samples": 4, "max_depth": 4},
    "normal": {"samples": 32, "max_depth": 16},
    "high": {"samples": SAMPLES_PER_PIXEL, "max_depth": MAX_DEPTH},
}

DEFAULT_QUALITY = "normal"
DEFAULT_SCENE = "three_spheres"
DEFAULT_OUTPUT = "image.ppm"
