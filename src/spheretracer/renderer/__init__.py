from spheretracer.renderer.raytracer import Renderer, ray_color, normal_color, sky_color, SHADERS
from spheretracer.renderer.color import write_color, to_rgb8, quantize_image
from spheretracer.renderer.image import write_ppm, save_image
from spheretracer.renderer.progress import ScanlineProgress

__all__ = [
    "Renderer", "ray_color", "normal_color", "sky_color", "SHADERS",
    "write_color", "to_rgb8", "quantize_image",
    "write_ppm", "save_image", "ScanlineProgress",
]
