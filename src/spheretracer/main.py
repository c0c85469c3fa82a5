# main.py
import argparse
import random
import sys
from typing import List, Optional

from spheretracer import config
from spheretracer.camera.camera import Camera
from spheretracer.renderer.color import quantize_image
from spheretracer.renderer.image import check_output_path, save_image, write_ppm
from spheretracer.renderer.progress import ScanlineProgress
from spheretracer.renderer.raytracer import Renderer, SHADERS
from spheretracer.scenes import SCENES


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spheretracer",
        description="Render a scene of spheres with a CPU path tracer.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default=config.DEFAULT_SCENE)
    parser.add_argument("--width", type=positive_int, default=config.IMAGE_WIDTH,
                        help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=positive_float, default=config.ASPECT_RATIO)
    parser.add_argument("--vfov", type=positive_float, default=None,
                        help="vertical field of view in degrees (default: viewport height 2)")
    parser.add_argument("--quality", choices=list(config.QUALITY_LEVELS), default=config.DEFAULT_QUALITY)
    parser.add_argument("--samples", type=positive_int, default=None,
                        help="samples per pixel (overrides --quality)")
    parser.add_argument("--max-depth", type=positive_int, default=None,
                        help="maximum bounces per path (overrides --quality)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--shader", choices=sorted(SHADERS), default="path")
    parser.add_argument("-o", "--output", default=config.DEFAULT_OUTPUT,
                        help="output file; .ppm is written as text, other extensions "
                             "via Pillow, '-' writes PPM to stdout")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("-q", "--quiet", action="store_true", help="no progress or diagnostics")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    quality = config.QUALITY_LEVELS[args.quality]
    samples = args.samples if args.samples is not None else quality["samples"]
    max_depth = args.max_depth if args.max_depth is not None else quality["max_depth"]

    def log(message: str):
        if not args.quiet:
            print(message, file=sys.stderr)

    def write_error(e: Exception) -> int:
        print(f"Error: cannot write image to {args.output}: {e}", file=sys.stderr)
        return 1

    if args.output != "-":
        try:
            check_output_path(args.output)
        except ValueError as e:
            return write_error(e)

    if args.vfov is not None:
        camera = Camera.from_vfov(args.vfov, args.aspect_ratio)
    else:
        camera = Camera(aspect_ratio=args.aspect_ratio,
                        viewport_height=config.VIEWPORT_HEIGHT,
                        focal_length=config.FOCAL_LENGTH)

    renderer = Renderer.for_aspect(args.width, args.aspect_ratio,
                                   samples_per_pixel=samples, max_depth=max_depth,
                                   seed=args.seed, shader=args.shader)

    world = SCENES[args.scene](rng=random.Random(args.seed), verbose=not args.quiet)

    log("\n=== Rendering ===")
    log(f"Resolution: {renderer.width}x{renderer.height}")
    log(f"Samples per pixel: {samples}")
    log(f"Max bounces: {max_depth}")
    log(f"Seed: {renderer.seed}")
    log(f"Shader: {renderer.shader_name}")

    pixels = renderer.render(camera, world, progress=None if args.quiet else ScanlineProgress())

    try:
        if args.output == "-":
            write_ppm(sys.stdout, pixels, samples)
            sys.stdout.flush()
        else:
            save_image(args.output, pixels, samples)
    except (OSError, ValueError) as e:
        return write_error(e)
    if args.output != "-":
        log(f"Wrote {args.output}")

    if args.preview:
        # Imported here so pygame is only initialized when a window is wanted
        from spheretracer.renderer.preview import show
        show(quantize_image(pixels, samples), title=f"spheretracer - {args.scene}")

    return 0
