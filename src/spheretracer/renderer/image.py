# renderer/image.py
import os
from typing import TextIO

import numpy as np
from PIL import Image

from spheretracer.core.vector import Color
from spheretracer.renderer.color import write_color, quantize_image


def write_ppm(out: TextIO, pixels: np.ndarray, samples_per_pixel: int):
    """
    Writes a (height, width, 3) buffer of summed samples as an ASCII PPM
    (P3), rows top to bottom.
    """
    height, width, _ = pixels.shape
    out.write(f"P3\n{width} {height}\n255\n")
    for j in range(height):
        for i in range(width):
            r, g, b = pixels[j, i]
            write_color(out, Color(float(r), float(g), float(b)), samples_per_pixel)


def to_pil_image(pixels: np.ndarray, samples_per_pixel: int) -> Image.Image:
    return Image.fromarray(quantize_image(pixels, samples_per_pixel))


def check_output_path(path: str):
    """
    Fails early for file names no writer here can handle: anything that is
    not ``.ppm`` and that Pillow has no encoder for, including names with
    no extension at all.

    Raises:
        ValueError: If the extension is unknown.
    """
    ext = os.path.splitext(path)[1].lower()
    if ext == ".ppm":
        return
    if ext not in Image.registered_extensions():
        raise ValueError(f"unknown file extension {ext!r}" if ext else "file name has no extension")


def save_image(path: str, pixels: np.ndarray, samples_per_pixel: int):
    """
    Saves the render. ``.ppm`` files are written as P3 text; any other
    extension is handed to Pillow.

    Raises:
        ValueError: If the extension is unknown.
        OSError: If the file cannot be written.
    """
    check_output_path(path)
    if os.path.splitext(path)[1].lower() == ".ppm":
        with open(path, "w") as f:
            write_ppm(f, pixels, samples_per_pixel)
    else:
        to_pil_image(pixels, samples_per_pixel).save(path)
