#!/usr/bin/env python3
"""Render one of the demo scenes to a PPM or PNG file.

The image format follows the output suffix: ``.png`` is written with Pillow,
anything else as plain PPM. Without ``--output`` the file is named
``<width>_<height>_<timestamp>.ppm`` in the current directory.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene NAME        spheres, room or patterns (default: spheres)
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 200)
    --fov RADIANS       Field of view in radians (default: pi / 3)
    --output OUTPUT     Output file path (default: timestamped .ppm)
    --gamma GAMMA       Gamma for PNG output and preview (default: 1.0)
    --serial            Render with the serial Python loop instead of Taichi
    --show              Open a Matplotlib preview window after rendering
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_scene --scene room --width 800 --height 400 --output room.png
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from pathlib import Path

from raylite.core.ti_types import init_taichi


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        choices=("spheres", "room", "patterns"),
        default="spheres",
        help="Scene to render (default: spheres)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=400,
        help="Image width in pixels (default: 400)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=200,
        help="Image height in pixels (default: 200)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=math.pi / 3,
        help="Field of view in radians (default: pi / 3)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file path (default: <width>_<height>_<timestamp>.ppm)",
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=1.0,
        help="Gamma for PNG output and preview (default: 1.0)",
    )
    parser.add_argument(
        "--serial",
        action="store_true",
        help="Render with the serial Python loop instead of the Taichi kernel",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Open a Matplotlib preview window after rendering",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def render_scene(
    scene: str = "spheres",
    width: int = 400,
    height: int = 200,
    field_of_view: float = math.pi / 3,
    output_path: str | None = None,
    gamma: float = 1.0,
    parallel: bool = True,
    show: bool = False,
    quiet: bool = False,
) -> Path:
    """Build, render and save a demo scene.

    Args:
        scene: Name of the scene builder in raylite.scene.scenes.SCENES.
        width: Image width in pixels.
        height: Image height in pixels.
        field_of_view: Field of view in radians.
        output_path: Output file; the suffix selects PNG or PPM.
        gamma: Gamma applied to PNG output and the preview.
        parallel: Render with the Taichi kernel.
        show: Display the result with Matplotlib.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so Taichi is initialised before any fields are allocated
    from raylite.preview.display import show_preview
    from raylite.preview.export import default_filename, save_png, save_ppm
    from raylite.scene.scenes import SCENES

    if not quiet:
        print(f"Creating {scene} scene ({width}x{height})...")

    world, camera = SCENES[scene](width, height, field_of_view)

    if not quiet:
        backend = "Taichi kernel" if parallel else "serial loop"
        print(f"Rendering {len(world)} shapes with the {backend}...")

    start_time = time.time()
    canvas = camera.render(world, parallel=parallel)
    render_time = time.time() - start_time

    output_file = Path(output_path) if output_path else Path(default_filename(canvas))
    if output_file.suffix.lower() == ".png":
        save_png(canvas, output_file, gamma=gamma)
    else:
        save_ppm(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Render time: {render_time:.2f}s")

    if show:
        show_preview(canvas, gamma=gamma, title=f"{scene} ({width}x{height})")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if not args.serial:
        init_taichi()
        if not args.quiet:
            print("Using Taichi CPU backend")

    try:
        render_scene(
            scene=args.scene,
            width=args.width,
            height=args.height,
            field_of_view=args.fov,
            output_path=args.output,
            gamma=args.gamma,
            parallel=not args.serial,
            show=args.show,
            quiet=args.quiet,
        )
        return 0
    except (ValueError, RuntimeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
