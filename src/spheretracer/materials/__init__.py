from spheretracer.materials.material import Material, ScatterResult
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.metal import Metal
from spheretracer.materials.dielectric import Dielectric

__all__ = ["Material", "ScatterResult", "Lambertian", "Metal", "Dielectric"]
