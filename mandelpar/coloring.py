"""Histogram-based colouring of escape counts and PPM output."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from typing import BinaryIO

PI = 3.14159265359

Grid = Sequence[Sequence[int]]


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _channel(value: float) -> int:
    return max(0, min(255, int(value)))


def iteration_histogram(point_counts: Grid, max_iterations: int) -> list[int]:
    """Count how many points escaped at each iteration count 1..max_iterations."""
    histogram = [0] * max_iterations
    for row in point_counts:
        for count in row:
            if not 1 <= count <= max_iterations:
                raise ValueError(
                    f"iteration count {count} outside 1..{max_iterations}"
                )
            histogram[count - 1] += 1
    return histogram


def spectrum_positions(histogram: Sequence[int]) -> list[int]:
    """Place each non-empty iteration bucket at the middle of its spectrum slice."""
    positions = []
    leading_edge = 0
    for width in histogram:
        positions.append(leading_edge + width // 2 + 1 if width else 0)
        leading_edge += width
    return positions


def pixel_color(
    count: int, max_iterations: int, positions: Sequence[int], total: int
) -> tuple[int, int, int]:
    """Return the RGB colour of a point with the given escape count."""
    if count == max_iterations:
        return (0, 0, 0)
    ratio = _f32(_f32(float(positions[count - 1])) / _f32(float(total)))
    red = math.sin(ratio * PI / 2) * 255
    green = math.sin(ratio * PI) * 255
    blue = math.cos(ratio * PI / 2) * 255
    return (_channel(red), _channel(green), _channel(blue))


def spectrum_to_rgb(
    point_counts: Grid, max_iterations: int, positions: Sequence[int]
) -> bytes:
    """Render a grid of escape counts into packed RGB bytes, row by row."""
    height = len(point_counts)
    width = len(point_counts[0]) if height else 0
    total = width * height
    pixels = bytearray()
    for row in point_counts:
        for count in row:
            pixels.extend(pixel_color(count, max_iterations, positions, total))
    return bytes(pixels)


def ppm_header(width: int, height: int) -> bytes:
    """Return the binary PPM (P6) header for an image of the given size."""
    return f"P6\n{width} {height}\n255\n".encode("ascii")


def write_ppm(stream: BinaryIO, point_counts: Grid, max_iterations: int) -> int:
    """Write a coloured PPM image of the grid to ``stream``; return bytes written."""
    height = len(point_counts)
    if height == 0:
        raise ValueError("point grid is empty")
    width = len(point_counts[0])
    histogram = iteration_histogram(point_counts, max_iterations)
    positions = spectrum_positions(histogram)
    data = ppm_header(width, height) + spectrum_to_rgb(
        point_counts, max_iterations, positions
    )
    stream.write(data)
    return len(data)