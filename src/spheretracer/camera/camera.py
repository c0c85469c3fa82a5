# camera/camera.py
import math
from spheretracer.core.vector import Point3, Vector3
from spheretracer.core.ray import Ray
from spheretracer.core.utils import degrees_to_radians


class Camera:
    """
    Pinhole camera looking down -z from origin. The viewport sits
    focal_length in front of the origin and is viewport_height tall.
    """
    def __init__(self, aspect_ratio: float = 16.0 / 9.0, viewport_height: float = 2.0,
                 focal_length: float = 1.0, origin: Point3 = None):
        self.aspect_ratio = aspect_ratio
        self.viewport_height = viewport_height
        self.viewport_width = aspect_ratio * viewport_height
        self.focal_length = focal_length

        self.origin = origin if origin is not None else Point3(0.0, 0.0, 0.0)
        self.horizontal = Vector3(self.viewport_width, 0.0, 0.0)
        self.vertical = Vector3(0.0, viewport_height, 0.0)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  Vector3(0.0, 0.0, focal_length))

    @classmethod
    def from_vfov(cls, vfov: float, aspect_ratio: float, origin: Point3 = None) -> "Camera":
        """
        Builds a camera from a vertical field of view in degrees.
        """
        h = math.tan(degrees_to_radians(vfov) / 2)
        return cls(aspect_ratio=aspect_ratio, viewport_height=2.0 * h, origin=origin)

    def get_ray(self, u: float, v: float) -> Ray:
        """
        Generates a ray through the viewport coordinates (u, v), with (0, 0)
        at the lower-left corner and (1, 1) at the upper-right.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * u +
                     self.vertical * v -
                     self.origin)
        return Ray(self.origin, direction)
