# renderer/color.py
import math
from typing import TextIO, Tuple

import numpy as np
from numba import njit

from spheretracer.core.vector import Color
from spheretracer.core.utils import clamp

# Highest linear value kept before quantizing, so 256 * c stays below 256
MAX_INTENSITY = 0.999


def _gamma_2(c: float) -> float:
    # Negative and NaN channels come out black
    if not c > 0.0:
        return 0.0
    return math.sqrt(c)


def to_rgb8(pixel_color: Color, samples_per_pixel: int) -> Tuple[int, int, int]:
    """
    Averages a summed pixel color over its samples, applies gamma 2 and
    quantizes each channel to [0, 255].
    """
    scale = 1.0 / samples_per_pixel
    return tuple(
        int(256 * clamp(_gamma_2(c * scale), 0.0, MAX_INTENSITY))
        for c in pixel_color
    )


def write_color(out: TextIO, pixel_color: Color, samples_per_pixel: int):
    """
    Writes one pixel as a PPM text line "r g b".
    """
    r, g, b = to_rgb8(pixel_color, samples_per_pixel)
    out.write(f"{r} {g} {b}\n")


@njit(cache=False)
def quantize_image(pixels, samples_per_pixel):
    """
    Applies the to_rgb8() conversion to a whole (height, width, 3) buffer
    of summed samples and returns a uint8 image.
    """
    height, width, channels = pixels.shape
    out = np.zeros((height, width, channels), dtype=np.uint8)
    scale = 1.0 / samples_per_pixel
    for j in range(height):
        for i in range(width):
            for k in range(channels):
                c = pixels[j, i, k] * scale
                if c > 0.0:
                    c = math.sqrt(c)
                else:
                    c = 0.0
                if c > MAX_INTENSITY:
                    c = MAX_INTENSITY
                out[j, i, k] = int(256.0 * c)
    return out
