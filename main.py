#!/usr/bin/env python3
"""
RayForge - A Python Sphere Ray Tracer

Main entry point for rendering the built-in scene.
"""

import argparse
import sys
import time
from pathlib import Path

from rayforge.camera import Camera
from rayforge.renderer import Renderer, RenderSettings, write_ppm
from rayforge.scenes import create_default_scene
from rayforge import utils


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='RayForge - A Python Sphere Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output render.ppm
  python main.py --width 200 --height 112 --samples 10 --output preview.png
  python main.py --seed 7 --output - > image.ppm
        '''
    )

    parser.add_argument('--width', type=int, default=400, help='Image width (default: 400)')
    parser.add_argument('--height', type=int, default=225, help='Image height (default: 225)')
    parser.add_argument('--samples', type=int, default=100, help='Samples per pixel (default: 100)')
    parser.add_argument('--depth', type=int, default=50, help='Max ray depth (default: 50)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for reproducible renders')
    parser.add_argument('--output', type=str, default='output/render.ppm',
                        help="Output filename, '-' for PPM on stdout (default: output/render.ppm)")
    parser.add_argument('--quiet', action='store_true', help='Suppress progress output')
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    def log(message: str = '', end: str = '\n'):
        if not args.quiet:
            print(message, end=end, file=sys.stderr, flush=True)

    try:
        settings = RenderSettings(
            width=args.width,
            height=args.height,
            samples_per_pixel=args.samples,
            max_depth=args.depth
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.seed is not None:
        utils.seed(args.seed)

    log("=" * 60)
    log("RayForge Ray Tracer")
    log("=" * 60)
    log("Render Settings:")
    log(f"  Resolution: {settings.width}x{settings.height}")
    log(f"  Samples: {settings.samples_per_pixel}")
    log(f"  Max Depth: {settings.max_depth}")

    world = create_default_scene()
    camera = Camera(aspect_ratio=settings.width / settings.height)
    log(f"  Objects in scene: {len(world)}")

    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            log(f'\rRendering: [{bar}] {pct}%', end='')

    renderer.set_progress_callback(progress_callback)

    log("\nRendering...")
    start_time = time.time()

    image = renderer.render(world, camera)

    elapsed = max(time.time() - start_time, 1e-9)
    log(f"\nRender completed in {elapsed:.2f} seconds")
    log(f"  Rays per second: {(settings.width * settings.height * settings.samples_per_pixel) / elapsed:.0f}")

    if args.output == '-':
        write_ppm(renderer.to_ldr(image), sys.stdout)
    else:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        log(f"\nSaving to: {args.output}")
        renderer.save_image(image, args.output)

    log("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
