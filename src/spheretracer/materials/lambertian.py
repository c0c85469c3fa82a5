# materials/lambertian.py
import random
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Color
from spheretracer.core.utils import random_unit_vector
from spheretracer.materials.material import Material, ScatterResult


class Lambertian(Material):
    """
    Lambertian diffuse material.
    """
    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec, rng: random.Random) -> ScatterResult:
        scatter_direction = rec.normal + random_unit_vector(rng)

        # Catch degenerate scatter direction
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return self.albedo, Ray(rec.p, scatter_direction)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
