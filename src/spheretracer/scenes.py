# scenes.py
import random
import sys
from typing import Callable, Dict, Optional

from spheretracer.core.vector import Color, Point3
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import HittableList
from spheretracer.materials.dielectric import Dielectric
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.metal import Metal
from spheretracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets


def _log(verbose: bool, message: str):
    if verbose:
        print(message, file=sys.stderr)


def three_spheres(rng: Optional[random.Random] = None, verbose: bool = False) -> HittableList:
    """
    Diffuse sphere between a hollow glass sphere and a gold mirror, resting
    on a large ground sphere.
    """
    world = HittableList()
    _log(verbose, "\n=== Creating World ===")

    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, Lambertian(ColorPresets.GROUND)))
    _log(verbose, "Added ground sphere at (0, -100.5, -1) with radius 100")

    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    _log(verbose, "Added diffuse sphere at (0, 0, -1) with radius 0.5")

    # Both glass surfaces share one material; the inner one faces inward
    glass = DielectricPresets.glass()
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, glass))
    world.add(Sphere(Point3(-1.0, 0.0, -1.0), -0.4, glass))
    _log(verbose, f"Added hollow glass sphere at (-1, 0, -1) with radius 0.5, IOR: {glass.ref_idx}")

    world.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, MetalPresets.gold()))
    _log(verbose, "Added gold sphere at (1, 0, -1) with radius 0.5")

    return world


def single_sphere(rng: Optional[random.Random] = None, verbose: bool = False) -> HittableList:
    """
    One diffuse sphere of radius 0.5 straight ahead of the camera.
    """
    world = HittableList()
    _log(verbose, "\n=== Creating World ===")
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, Lambertian(ColorPresets.GRAY)))
    _log(verbose, "Added diffuse sphere at (0, 0, -1) with radius 0.5")
    return world


def random_spheres(rng: Optional[random.Random] = None, verbose: bool = False) -> HittableList:
    """
    A field of small randomly placed spheres with random materials in front
    of the camera, plus one large sphere of each material kind.
    """
    rng = rng if rng is not None else random.Random()
    world = HittableList()
    _log(verbose, "\n=== Creating World ===")

    world.add(Sphere(Point3(0.0, -1000.5, -1.0), 1000.0, Lambertian(ColorPresets.GRAY)))

    radius = 0.15
    for a in range(-4, 5):
        for b in range(-7, -1):
            center = Point3(a * 0.8 + 0.6 * rng.random(), -0.5 + radius, b + 0.6 * rng.random())
            choose_mat = rng.random()
            if choose_mat < 0.8:
                albedo = Color.random(rng) * Color.random(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                material = Metal(Color.random(rng, 0.5, 1.0), rng.uniform(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, radius, material))

    world.add(Sphere(Point3(-1.2, 0.0, -2.0), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Point3(0.0, 0.0, -2.5), 0.5, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(1.2, 0.0, -2.0), 0.5, MetalPresets.silver()))

    _log(verbose, f"Added {len(world)} spheres")
    return world


SCENES: Dict[str, Callable[..., HittableList]] = {
    "three_spheres": three_spheres,
    "single_sphere": single_sphere,
    "random_spheres": random_spheres,
}
