# materials/metal.py
import random
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Color
from spheretracer.core.utils import reflect, random_in_unit_sphere
from spheretracer.materials.material import Material, ScatterResult


class Metal(Material):
    """
    Metal material with reflective properties. fuzz is the radius of the
    sphere the mirror direction is jittered within; 0 is a perfect mirror.
    It is expected in [0, 1] and is not clamped.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec, rng: random.Random) -> ScatterResult:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        if reflected.dot(rec.normal) <= 0:
            return None  # Absorb the ray if it does not reflect away from the surface

        direction = reflected
        if self.fuzz != 0:
            direction = reflected + random_in_unit_sphere(rng) * self.fuzz
        return self.albedo, Ray(rec.p, direction)

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
