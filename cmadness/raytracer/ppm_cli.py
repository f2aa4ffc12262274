"""Command that renders the default scene and writes a binary PPM to stdout."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from cmadness.raytracer.render import render_scene
from cmadness.raytracer.scene import default_scene

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_THREADS = 4


def encode_ppm(pixels: bytes, width: int, height: int) -> bytes:
    """Return a binary (P6) PPM image of row-major RGB pixels."""
    if len(pixels) != width * height * 3:
        raise ValueError(f"expected {width * height * 3} bytes of pixels, got {len(pixels)}")
    return f"P6\n{width} {height}\n255\n".encode("ascii") + bytes(pixels)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render the built-in scene as a PPM on stdout.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render and write the image; return the exit status."""
    args = _parser().parse_args(argv)
    pixels = render_scene(default_scene(), args.width, args.height, args.threads)
    out = sys.stdout.buffer
    out.write(encode_ppm(pixels, args.width, args.height))
    out.flush()
    return 0