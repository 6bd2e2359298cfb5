import io

import pytest

from mandelpar.coloring import (
    iteration_histogram,
    pixel_color,
    ppm_header,
    spectrum_positions,
    spectrum_to_rgb,
    write_ppm,
)

GRID = [
    [1, 2, 2, 5],
    [2, 3, 5, 5],
    [1, 1, 4, 5],
]


def test_histogram_sums_to_point_count():
    histogram = iteration_histogram(GRID, 5)
    assert len(histogram) == 5
    assert sum(histogram) == 12


def test_histogram_counts_each_value():
    histogram = iteration_histogram(GRID, 5)
    flat = [v for row in GRID for v in row]
    assert histogram == [flat.count(k) for k in range(1, 6)]


def test_histogram_rejects_zero_count():
    with pytest.raises(ValueError):
        iteration_histogram([[0, 1]], 3)


def test_histogram_rejects_count_above_max():
    with pytest.raises(ValueError):
        iteration_histogram([[4]], 3)


def test_positions_worked_example():
    assert spectrum_positions([0, 3, 0, 2]) == [0, 2, 0, 5]


def test_positions_lie_within_their_slice():
    histogram = [4, 0, 1, 7, 0, 2]
    positions = spectrum_positions(histogram)
    leading = 0
    for width, position in zip(histogram, positions):
        if width == 0:
            assert position == 0
        else:
            assert leading < position <= leading + width
        leading += width


def test_max_iterations_is_black():
    assert pixel_color(5, 5, [1, 2, 3, 4, 5], 12) == (0, 0, 0)


def test_zero_position_is_blue():
    assert pixel_color(1, 5, [0, 0, 0, 0, 0], 12) == (0, 0, 255)


def test_colors_are_bytes():
    positions = spectrum_positions(iteration_histogram(GRID, 5))
    for count in range(1, 5):
        color = pixel_color(count, 5, positions, 12)
        assert all(0 <= channel <= 255 for channel in color)


def test_rgb_length_and_black_pixels():
    positions = spectrum_positions(iteration_histogram(GRID, 5))
    rgb = spectrum_to_rgb(GRID, 5, positions)
    assert len(rgb) == 3 * 12
    # last pixel of the first row has the max count
    assert rgb[9:12] == b"\x00\x00\x00"


def test_ppm_header_format():
    assert ppm_header(3, 2) == b"P6\n3 2\n255\n"


def test_write_ppm_contents():
    stream = io.BytesIO()
    written = write_ppm(stream, GRID, 5)
    data = stream.getvalue()
    header = ppm_header(4, 3)
    assert written == len(data)
    assert data.startswith(header)
    positions = spectrum_positions(iteration_histogram(GRID, 5))
    assert data[len(header):] == spectrum_to_rgb(GRID, 5, positions)


def test_write_ppm_rejects_empty_grid():
    with pytest.raises(ValueError):
        write_ppm(io.BytesIO(), [], 5)