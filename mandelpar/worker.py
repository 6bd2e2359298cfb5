"""Worker process that fills one horizontal band of a shared escape-count grid."""

from __future__ import annotations

import os
import sys

from .grid import SharedGrid
from .mandelbrot import compute_band

USAGE = (
    "worker ShmName RealLeft ImagLeft RealWidth ImagHeight "
    "EscapeIterations WidthPixels HeightPixels Index"
)


def run_worker(
    shm_name: str,
    start: complex,
    width: float,
    height: float,
    max_iterations: int,
    width_pixels: int,
    height_pixels: int,
    index: int,
) -> list[list[int]]:
    """Compute band ``index`` and store it in the shared grid named ``shm_name``.

    ``start`` is the top left corner of the band and ``height`` its extent on
    the imaginary axis; the band covers rows ``index * height_pixels`` up to
    ``(index + 1) * height_pixels`` of a square grid ``width_pixels`` wide.
    Returns the computed rows.
    """
    if index < 0:
        raise ValueError("index must not be negative")
    if height_pixels < 0:
        raise ValueError("height_pixels must not be negative")
    row_start = index * height_pixels
    pid = os.getpid()
    with SharedGrid.attach(shm_name, width_pixels, width_pixels) as grid:
        if row_start + height_pixels > grid.height:
            raise ValueError(
                f"rows {row_start}..{row_start + height_pixels - 1} "
                f"exceed grid height {grid.height}"
            )
        print(
            f"Top left coordinate is: {start.real:f} + {start.imag:f}i\n"
            f"Length of top/bottom side:  {width:f}\n"
            f"Pixels of top/bottom side:  {width_pixels}\n"
            f"Length of left/right side:  {height:f}\n"
            f"Pixels of left/right side:  {height_pixels}\n"
            f"Process {pid} testing rectangle at {start.real:.8f} + {start.imag:.8f} \n"
            f"\twidth {width:.8f} and height {height:.8f} \n"
            f"\tplot area width {width_pixels} by height {height_pixels} pixels.",
            flush=True,
        )
        # The band's rows are numbered from the top of the whole image, so the
        # band's own offset is added back to reach the image's top left corner.
        origin = start + index * height * 1j
        band = compute_band(
            origin, width, width_pixels, row_start, height_pixels, max_iterations
        )
        for offset, counts in enumerate(band):
            grid[row_start + offset] = counts
    print(f"Process {pid} done.", flush=True)
    return band


def main(argv: list[str] | None = None) -> int:
    """Run a worker from command-line arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 9:
        print(f"\n{USAGE}\n")
        return 1
    try:
        shm_name = args[0]
        start = complex(float(args[1]), float(args[2]))
        width = float(args[3])
        height = float(args[4])
        max_iterations = int(args[5])
        width_pixels = int(args[6])
        height_pixels = int(args[7])
        index = int(args[8])
    except ValueError:
        print(f"\n{USAGE}\n")
        return 1
    try:
        run_worker(
            shm_name,
            start,
            width,
            height,
            max_iterations,
            width_pixels,
            height_pixels,
            index,
        )
    except (OSError, ValueError) as error:
        print(f"\nWorker failed: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())