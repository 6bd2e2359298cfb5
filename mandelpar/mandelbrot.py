"""Escape-time computation of Mandelbrot set membership over a pixel grid."""

from __future__ import annotations

ESCAPE_RADIUS = 2.0


def escape_iterations(c: complex, max_iterations: int) -> int:
    """Return the iteration at which z -> z**2 + c first leaves radius 2.

    Points that never escape within ``max_iterations`` steps report
    ``max_iterations``.
    """
    z = 0j
    for iteration in range(1, max_iterations + 1):
        z = z * z + c
        if abs(z) > ESCAPE_RADIUS:
            return iteration
    return max_iterations


def compute_band(
    start: complex,
    width: float,
    width_pixels: int,
    row_start: int,
    row_count: int,
    max_iterations: int,
) -> list[list[int]]:
    """Compute escape counts for ``row_count`` rows beginning at ``row_start``.

    Pixel spacing is ``width / (width_pixels - 1)`` in both directions.
    Row ``h`` starts at ``start - h * spacing * i`` and moves right along
    the real axis one spacing per column.
    """
    if width_pixels < 2:
        raise ValueError("width_pixels must be at least 2")
    if row_start < 0 or row_count < 0:
        raise ValueError("row_start and row_count must not be negative")
    if max_iterations < 1:
        raise ValueError("max_iterations must be at least 1")

    increment = width / (float(width_pixels) - 1)
    band = []
    for row in range(row_start, row_start + row_count):
        c = start - row * increment * 1j
        counts = []
        for _ in range(width_pixels):
            counts.append(escape_iterations(c, max_iterations))
            c = c + increment
        band.append(counts)
    return band


def compute_image(
    start: complex, side: float, pixels: int, max_iterations: int
) -> list[list[int]]:
    """Compute escape counts for a square region with ``start`` at its top left."""
    if side <= 0:
        raise ValueError("side length must be greater than zero")
    if max_iterations < 2:
        raise ValueError("max iterations must be at least 2")
    if pixels < 2:
        raise ValueError("pixels must be at least 2")
    return compute_band(start, side, pixels, 0, pixels, max_iterations)