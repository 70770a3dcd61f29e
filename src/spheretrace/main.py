# main.py
import argparse
import sys
from typing import Optional, Sequence

from spheretrace.core.vector import Vector
from spheretrace.geometry.sphere import Sphere
from spheretrace.renderer.output import save_image
from spheretrace.renderer.raytracer import Renderer
from spheretrace.renderer.settings import (
    BACKENDS, FOV, HEIGHT, OUTPUT_PATH, SPHERE_POSITION, SPHERE_RADIUS, WIDTH, RenderSettings
)


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a single sphere through a pinhole camera")
    parser.add_argument("--width", type=int, default=WIDTH, help=f"Image width in pixels (default: {WIDTH})")
    parser.add_argument("--height", type=int, default=HEIGHT, help=f"Image height in pixels (default: {HEIGHT})")
    parser.add_argument("--fov", type=float, default=FOV, help=f"Field of view in degrees (default: {FOV})")
    parser.add_argument("--output", "-o", default=OUTPUT_PATH, help=f"Output image path (default: {OUTPUT_PATH})")
    parser.add_argument("--backend", choices=BACKENDS, default="numba",
                        help="Per-pixel loop implementation (default: numba)")
    parser.add_argument(
        "--sphere",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=SPHERE_POSITION[:3],
        help="Sphere center",
    )
    parser.add_argument("--radius", type=float, default=SPHERE_RADIUS, help="Sphere radius")
    parser.add_argument("--preview", action="store_true", help="Show the result in a window")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only report errors")
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    settings = RenderSettings(
        width=args.width,
        height=args.height,
        fov=args.fov,
        backend=args.backend,
        output=args.output,
        verbose=not args.quiet,
        sphere_position=tuple(args.sphere) + (0.0,),
        sphere_radius=args.radius,
    )
    sphere = Sphere(position=Vector.new(settings.sphere_position), radius=settings.sphere_radius)
    if settings.verbose:
        print(f"Sphere at {sphere.position.as_tuple()} with radius {sphere.radius}")

    renderer = Renderer(settings)
    image = renderer.render(sphere)
    save_image(image, settings.output)
    if settings.verbose:
        print(f"Saved {settings.output}")

    if args.preview:
        from spheretrace.renderer.preview import show_image
        show_image(image, verbose=settings.verbose)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    try:
        return run(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
