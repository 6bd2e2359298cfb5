import pytest

from mandelpar.grid import SharedGrid


def test_new_grid_is_zero_filled():
    with SharedGrid.create(4, 3) as grid:
        assert grid.rows() == [[0] * 4 for _ in range(3)]


def test_cell_round_trip():
    with SharedGrid.create(5, 5) as grid:
        for i in range(5):
            for j in range(5):
                grid[i, j] = i * 3 + j
        assert grid[4, 4] == 16
        assert grid[2] == [6, 7, 8, 9, 10]


def test_row_assignment():
    with SharedGrid.create(3, 2) as grid:
        grid[1] = [7, -8, 9]
        assert grid.rows() == [[0, 0, 0], [7, -8, 9]]


def test_row_assignment_wrong_length():
    with SharedGrid.create(3, 2) as grid:
        grid[0] = [4, 5, 6]
        with pytest.raises(ValueError):
            grid[0] = [1, 2]
        assert grid[0] == [4, 5, 6]
        assert grid.rows() == [[4, 5, 6], [0, 0, 0]]


def test_attached_grid_shares_values():
    with SharedGrid.create(5, 5) as owner:
        other = SharedGrid.attach(owner.name, 5, 5)
        try:
            for i in range(5):
                other[i] = [i * 3 + j for j in range(5)]
            assert owner.rows() == [[i * 3 + j for j in range(5)] for i in range(5)]
            owner[0, 0] = 42
            assert other[0, 0] == 42
        finally:
            other.close()


def test_context_exit_removes_segment():
    with SharedGrid.create(2, 2) as grid:
        name = grid.name
    with pytest.raises(FileNotFoundError):
        SharedGrid.attach(name, 2, 2)


def test_attach_larger_than_segment_fails():
    with SharedGrid.create(2, 2) as grid:
        with pytest.raises(ValueError):
            SharedGrid.attach(grid.name, 100, 100)


def test_out_of_range_indices():
    with SharedGrid.create(3, 3) as grid:
        grid[2, 2] = 11
        assert grid[2, 2] == 11
        assert grid[2] == [0, 0, 11]
        with pytest.raises(IndexError):
            grid[3, 0]
        with pytest.raises(IndexError):
            grid[0, 3]
        with pytest.raises(IndexError):
            grid[-1]
        assert grid.rows() == [[0, 0, 0], [0, 0, 0], [0, 0, 11]]


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        SharedGrid.create(0, 4)


def test_closed_grid_rejects_access():
    grid = SharedGrid.create(2, 2)
    try:
        grid[0, 0] = 5
        assert grid[0, 0] == 5
        grid.close()
        with pytest.raises(ValueError):
            grid[0, 0]
    finally:
        grid.unlink()