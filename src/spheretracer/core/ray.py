# core/ray.py
from spheretracer.core.vector import Point3, Vector3


class Ray:
    """Half-line ``origin + t * direction``; ``direction`` keeps its length."""
    def __init__(self, origin: Point3, direction: Vector3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        # t < 0 lands behind the origin
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
