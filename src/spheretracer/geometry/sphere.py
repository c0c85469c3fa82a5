# geometry/sphere.py
import math
from typing import Optional, TYPE_CHECKING
from spheretracer.core.vector import Point3
from spheretracer.core.ray import Ray
from spheretracer.geometry.hittable import Hittable, HitRecord

if TYPE_CHECKING:
    from spheretracer.materials.material import Material


class Sphere(Hittable):
    """
    Analytic sphere. The sign of ``radius`` decides which way the outward
    normal faces, so a negative radius turns the same surface inside out
    (used for the inner wall of hollow glass).
    """
    def __init__(self, center: Point3, radius: float, material: "Material"):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # |O + tD - C|^2 = r^2 with b = 2h
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        h = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        disc = h * h - a * c
        if disc < 0:
            return None

        sq = math.sqrt(disc)
        for t in ((-h - sq) / a, (-h + sq) / a):
            if t_min <= t <= t_max:
                break
        else:
            return None

        p = ray.at(t)
        rec = HitRecord(p=p, t=t, material=self.material)
        rec.set_face_normal(ray, (p - self.center) / self.radius)
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
