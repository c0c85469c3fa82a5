"""Pytest configuration for spheretracer tests.

Provides seeded random generators and a generator stub that always
returns the same draw, for deterministic material tests.
"""

import random

import pytest

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord


class FixedRandom(random.Random):
    """Random generator whose random() always returns ``value``."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom instances."""
    return FixedRandom


@pytest.fixture
def make_hit():
    """Factory building a HitRecord at ``p`` for a ray travelling along
    ``direction`` and a surface with the given outward normal."""

    def _make_hit(direction, outward_normal, p=None, material=None):
        p = p if p is not None else Vector3(0.0, 0.0, 0.0)
        ray = Ray(p - direction, direction)
        rec = HitRecord(p=p, t=1.0, material=material)
        rec.set_face_normal(ray, outward_normal)
        return ray, rec

    return _make_hit
