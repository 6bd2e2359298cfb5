"""Render a Mandelbrot image in a single process."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .coloring import write_ppm
from .mandelbrot import compute_image

USAGE = (
    "mandel RealCoord ImagCoord SideLength EscapeIterations PixelsPerSide ImageFile"
)
MIN_PIXELS = 48


def render_serial(
    start: complex,
    side: float,
    max_iterations: int,
    pixels: int,
    path: str | os.PathLike[str],
) -> list[list[int]]:
    """Compute a square image with ``start`` at its top left and save it as PPM."""
    if side <= 0:
        raise ValueError("Range must be greater than zero.")
    if max_iterations < 2:
        raise ValueError("Max iterations must be at least 2.")
    if pixels < MIN_PIXELS:
        raise ValueError(f"Pixels must be at least {MIN_PIXELS}.")

    print(f"Top left coordinate is: {start.real:f} + {start.imag:f}i")
    print(f"Length of a side:  {side:f}")
    print(f"Pixels per side:  {pixels}")
    print(
        f"Process {os.getpid()} testing rectangle at "
        f"{start.real:.8f} + {start.imag:.8f} \n"
        f"\twidth {side:.8f} and height {side:.8f} \n"
        f"\tplot area width {pixels} by height {pixels} pixels."
    )

    point_counts = compute_image(start, side, pixels, max_iterations)
    try:
        stream = open(Path(path), "wb")
    except OSError as error:
        raise OSError(f"{path} cannot be opened for write") from error
    with stream:
        write_ppm(stream, point_counts, max_iterations)
    return point_counts


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 6:
        print(USAGE)
        return 1
    try:
        start = complex(float(args[0]), float(args[1]))
        side = float(args[2])
        max_iterations = int(args[3])
        pixels = int(args[4])
    except ValueError:
        print(USAGE)
        return 1
    try:
        render_serial(start, side, max_iterations, pixels, args[5])
    except (OSError, ValueError) as error:
        print(error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())