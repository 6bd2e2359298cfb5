"""Render a Mandelbrot image by splitting the rows between worker processes."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from .coloring import write_ppm
from .grid import SharedGrid
from .mandelbrot import compute_band

USAGE = (
    "Proper Format: pmandel <tlr> <tli> <side-length> <max-iterations> "
    "<pixels> <image-file> <nprocs>"
)


@dataclass(frozen=True)
class RenderOptions:
    """Everything needed to render one image."""

    real: float
    imag: float
    side: float
    max_iterations: int
    pixels: int
    image_file: str
    workers: int

    @property
    def start(self) -> complex:
        return complex(self.real, self.imag)


def parse_args(argv: list[str] | None = None) -> RenderOptions:
    """Parse and validate the seven command-line arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 7:
        raise ValueError(USAGE)
    try:
        real = float(args[0])
        imag = float(args[1])
        side = float(args[2])
        max_iterations = int(args[3])
        pixels = int(args[4])
        workers = int(args[6])
    except ValueError:
        raise ValueError(USAGE) from None
    if workers <= 0:
        raise ValueError("No Children!")
    if pixels < 10:
        raise ValueError("Must be at least 10 pixels!")
    if side <= 0:
        raise ValueError("Width must be greater than zero.")
    if max_iterations < 2:
        raise ValueError("Max iterations must be at least 2.")
    return RenderOptions(real, imag, side, max_iterations, pixels, args[5], workers)


def band_layout(pixels: int, workers: int) -> list[tuple[int, int]]:
    """Return ``(first_row, row_count)`` of each worker's band of equal height."""
    if workers <= 0:
        raise ValueError("No Children!")
    if workers > pixels:
        raise ValueError("more workers than rows")
    rows = pixels // workers
    return [(index * rows, rows) for index in range(workers)]


def _worker_env() -> dict[str, str]:
    env = dict(os.environ)
    root = str(Path(__file__).resolve().parent.parent)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = root + (os.pathsep + existing if existing else "")
    return env


def render(options: RenderOptions) -> list[list[int]]:
    """Render the image described by ``options``; return the escape counts."""
    pixels = options.pixels
    layout = band_layout(pixels, options.workers)
    ratio = 1.0 / options.workers
    band_height = options.side * ratio
    env = _worker_env()

    with SharedGrid.create(pixels, pixels) as grid:
        processes = []
        for index, (_, row_count) in enumerate(layout):
            band_imag = options.imag - index * ratio * options.side
            command = [
                sys.executable,
                "-m",
                "mandelpar.worker",
                grid.name,
                repr(options.real),
                repr(band_imag),
                repr(options.side),
                repr(band_height),
                str(options.max_iterations),
                str(pixels),
                str(row_count),
                str(index),
            ]
            processes.append(subprocess.Popen(command, env=env))

        failed = [index for index, process in enumerate(processes) if process.wait() != 0]
        if failed:
            raise RuntimeError(f"worker(s) {failed} failed")

        covered = sum(count for _, count in layout)
        if covered < pixels:
            leftover = compute_band(
                options.start,
                options.side,
                pixels,
                covered,
                pixels - covered,
                options.max_iterations,
            )
            for offset, counts in enumerate(leftover):
                grid[covered + offset] = counts

        point_counts = grid.rows()

    with open(options.image_file, "wb") as stream:
        write_ppm(stream, point_counts, options.max_iterations)
    return point_counts


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point; return the exit status."""
    try:
        options = parse_args(argv)
    except ValueError as error:
        print(f"\n{error}\n")
        return 1
    try:
        render(options)
    except (OSError, RuntimeError, ValueError) as error:
        print(f"\n{error}\n")
        return 1
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())