# materials/material.py
import random
from typing import Optional, Tuple, TYPE_CHECKING
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Color

if TYPE_CHECKING:
    from spheretracer.geometry.hittable import HitRecord

# (attenuation, scattered_ray), or None when the ray is absorbed
ScatterResult = Optional[Tuple[Color, Ray]]


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable once built and may be shared by any number
    of primitives.
    """
    def scatter(self, ray_in: Ray, rec: "HitRecord", rng: random.Random) -> ScatterResult:
        """
        Computes the attenuation and scattered ray.
        Returns a tuple (attenuation, scattered_ray) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
