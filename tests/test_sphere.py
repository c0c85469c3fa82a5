"""Unit tests for sphere intersection.

Tests cover:
- Near-root hits from outside the sphere
- Far-root hits from inside the sphere
- Rays starting on the surface and pointing away
- Interval rejection by t_min / t_max
- Normal orientation and the front_face flag
- Negative radius (inward-facing) spheres
- The abstract Hittable base
"""

import math

import pytest

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord, Hittable
from spheretracer.geometry.sphere import Sphere
from spheretracer.materials.lambertian import Lambertian

MATERIAL = Lambertian(Vector3(0.5, 0.5, 0.5))


class TestHitFromOutside:
    """Tests for rays starting outside the sphere."""

    @pytest.mark.parametrize("distance, radius", [(3.0, 1.0), (1.0, 0.5), (10.0, 2.5)])
    def test_near_root(self, distance, radius):
        """Ray aimed at the center hits at distance - radius."""
        sphere = Sphere(Vector3(0.0, 0.0, -distance), radius, MATERIAL)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, distance - radius, rel_tol=1e-12)
        assert rec.p.is_close(Vector3(0.0, 0.0, radius - distance))

    def test_normal_is_unit_and_radial(self):
        sphere = Sphere(Vector3(1.0, 2.0, -5.0), 2.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 2.5, -4.0))
        rec = sphere.hit(ray, 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.normal.length(), 1.0, rel_tol=1e-9)
        radial = (rec.p - sphere.center).normalize()
        assert rec.normal.is_close(radial)
        assert rec.front_face

    def test_material_is_shared_reference(self):
        sphere = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, MATERIAL)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), 0.001, math.inf)
        assert rec.material is MATERIAL

    def test_miss(self):
        sphere = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, -1.0))
        assert sphere.hit(ray, 0.001, math.inf) is None

    def test_sphere_behind_ray(self):
        sphere = Sphere(Vector3(0.0, 0.0, 2.0), 0.5, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray, 0.001, math.inf) is None

    def test_t_max_rejects_both_roots(self):
        sphere = Sphere(Vector3(0.0, 0.0, -3.0), 1.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray, 0.001, 1.5) is None

    def test_t_min_falls_through_to_far_root(self):
        sphere = Sphere(Vector3(0.0, 0.0, -3.0), 1.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        rec = sphere.hit(ray, 2.5, math.inf)
        assert math.isclose(rec.t, 4.0)
        assert not rec.front_face

    def test_roots_on_interval_ends_are_accepted(self):
        sphere = Sphere(Vector3(0.0, 0.0, -3.0), 1.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        assert math.isclose(sphere.hit(ray, 0.001, 2.0).t, 2.0)
        assert math.isclose(sphere.hit(ray, 4.0, math.inf).t, 4.0)


class TestHitFromInside:
    """Tests for rays starting inside or on the sphere."""

    def test_origin_inside_uses_far_root(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0, MATERIAL)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 2.0)
        assert not rec.front_face
        # Stored normal faces back toward the ray origin
        assert rec.normal == Vector3(-1.0, 0.0, 0.0)

    def test_origin_on_surface_pointing_out_misses(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, 1.0))
        assert sphere.hit(ray, 0.001, math.inf) is None

    def test_origin_on_surface_pointing_in_hits_far_side(self):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, -1.0))
        rec = sphere.hit(ray, 0.001, math.inf)
        assert math.isclose(rec.t, 2.0)


class TestNegativeRadius:
    def test_normal_flipped(self):
        """A negative radius turns the outward normal inward."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), -0.5, MATERIAL)
        ray = Ray(Vector3(0.0, 0.0, 2.0), Vector3(0.0, 0.0, -1.0))
        rec = sphere.hit(ray, 0.001, math.inf)
        assert math.isclose(rec.t, 1.5)
        assert not rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, 1.0)


class TestSetFaceNormal:
    def test_front_face(self):
        rec = HitRecord()
        rec.set_face_normal(Ray(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, -1.0)), Vector3(0.0, 0.0, 1.0))
        assert rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, 1.0)

    def test_back_face(self):
        rec = HitRecord()
        rec.set_face_normal(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)), Vector3(0.0, 0.0, 1.0))
        assert not rec.front_face
        assert rec.normal == Vector3(0.0, 0.0, -1.0)


class TestHittableBase:
    def test_hit_is_abstract(self):
        ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0))
        with pytest.raises(NotImplementedError, match="Hittable"):
            Hittable().hit(ray, 0.001, math.inf)
