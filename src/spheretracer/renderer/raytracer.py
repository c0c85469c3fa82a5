# renderer/raytracer.py
import math
import random
from typing import Callable, Optional

import numpy as np

from spheretracer import config
from spheretracer.camera.camera import Camera
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Color
from spheretracer.geometry.hittable import Hittable

WHITE = Color(1.0, 1.0, 1.0)
SKY_BLUE = Color(0.5, 0.7, 1.0)
BLACK = Color(0.0, 0.0, 0.0)

# Shader signature: (ray, world, depth, rng) -> linear color
Shader = Callable[[Ray, Hittable, int, random.Random], Color]


def sky_color(ray: Ray) -> Color:
    """
    Background gradient from white (looking down) to sky blue (looking up).
    This is the only light in the scene.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return (1.0 - t) * WHITE + t * SKY_BLUE


def ray_color(ray: Ray, world: Hittable, depth: int, rng: random.Random,
              t_min: float = config.T_MIN) -> Color:
    """
    Returns the color seen along the ray, following material scattering for
    at most ``depth`` bounces. Runs as a loop carrying the product of
    attenuations, so the stack does not grow with depth.
    """
    attenuation = WHITE
    while True:
        if depth <= 0:
            return BLACK  # Exceeded bounce budget

        rec = world.hit(ray, t_min, math.inf)
        if rec is None:
            return attenuation * sky_color(ray)

        scatter_result = rec.material.scatter(ray, rec, rng)
        if scatter_result is None:
            return BLACK  # Absorbed

        surface_attenuation, ray = scatter_result
        attenuation = attenuation * surface_attenuation
        depth -= 1


def normal_color(ray: Ray, world: Hittable, depth: int, rng: random.Random,
                 t_min: float = config.T_MIN) -> Color:
    """
    Debug shader mapping the surface normal at the first hit to a color,
    (n + 1) / 2 per channel. Misses show the sky.
    """
    rec = world.hit(ray, t_min, math.inf)
    if rec is None:
        return sky_color(ray)
    return 0.5 * (rec.normal + 1.0)


SHADERS = {
    "path": ray_color,
    "normals": normal_color,
}


class Renderer:
    """
    Renders a world through a camera one pixel at a time on the calling
    thread. Owns its random generator, so equal seeds give equal images.
    """
    def __init__(self, width: int, height: int,
                 samples_per_pixel: int = config.SAMPLES_PER_PIXEL,
                 max_depth: int = config.MAX_DEPTH,
                 seed: Optional[int] = None,
                 shader: str = "path"):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be positive, got {samples_per_pixel}")
        if shader not in SHADERS:
            raise ValueError(f"Unknown shader {shader!r}, expected one of {sorted(SHADERS)}")

        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.seed = seed
        self.shader_name = shader
        self.shader: Shader = SHADERS[shader]
        self.rng = random.Random(seed)

    @classmethod
    def for_aspect(cls, width: int, aspect_ratio: float, **kwargs) -> "Renderer":
        return cls(width, max(1, int(width / aspect_ratio)), **kwargs)

    def render_pixel(self, i: int, j: int, camera: Camera, world: Hittable) -> Color:
        """
        Sum of samples_per_pixel jittered samples for pixel column i, row j,
        with j counted from the bottom of the image.
        """
        # Guard single-pixel images against a zero denominator
        u_span = max(self.width - 1, 1)
        v_span = max(self.height - 1, 1)
        pixel_color = BLACK
        for _ in range(self.samples_per_pixel):
            u = (i + self.rng.random()) / u_span
            v = (j + self.rng.random()) / v_span
            ray = camera.get_ray(u, v)
            pixel_color = pixel_color + self.shader(ray, world, self.max_depth, self.rng)
        return pixel_color

    def render(self, camera: Camera, world: Hittable,
               progress: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Renders the full image and returns a (height, width, 3) float array
        of summed linear samples, first row at the top of the image.
        progress, if given, is called with the number of scanlines left
        before each row and with 0 when finished.
        """
        pixels = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for j in range(self.height - 1, -1, -1):
            if progress is not None:
                progress(j + 1)
            row = self.height - 1 - j
            for i in range(self.width):
                pixels[row, i] = self.render_pixel(i, j, camera, world).to_tuple()
        if progress is not None:
            progress(0)
        return pixels
