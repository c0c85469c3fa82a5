# geometry/hittable.py
from typing import Optional, TYPE_CHECKING
from spheretracer.core.vector import Point3, Vector3
from spheretracer.core.ray import Ray

if TYPE_CHECKING:
    from spheretracer.materials.material import Material


class HitRecord:
    """
    Result of one intersection query.

    ``p`` is where the ray met the surface and ``t`` the ray parameter there.
    ``normal`` is unit length and faces back toward the ray origin;
    ``front_face`` tells whether the ray came from outside the surface.
    """
    def __init__(self, p: Point3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True,
                 material: "Material" = None):
        self.p = p
        self.normal = normal
        self.t = t
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """Stores ``outward_normal`` flipped, if needed, to oppose ``ray``."""
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable:
    """Anything a ray can be tested against."""
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError(f"{type(self).__name__} does not implement hit()")
