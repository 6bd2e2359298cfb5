"""A two-dimensional grid of integers held in named shared memory."""

from __future__ import annotations

import os
from collections.abc import Sequence
from multiprocessing import resource_tracker, shared_memory

_CELL_FORMAT = "i"
_CELL_SIZE = 4


def _open_existing(name: str) -> shared_memory.SharedMemory:
    """Attach to an existing segment without letting this process own it."""
    try:
        return shared_memory.SharedMemory(name=name, track=False)
    except TypeError:
        shm = shared_memory.SharedMemory(name=name)
        if os.name == "posix":
            resource_tracker.unregister(shm._name, "shared_memory")
        return shm


class SharedGrid:
    """Rows of integers in a shared memory segment that other processes can attach to."""

    def __init__(self, width: int, height: int, name: str | None = None, create: bool = True):
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.owner = create
        size = width * height * _CELL_SIZE
        if create:
            self._shm = shared_memory.SharedMemory(name=name, create=True, size=size)
        else:
            if name is None:
                raise ValueError("a name is required to attach to a grid")
            self._shm = _open_existing(name)
            if self._shm.size < size:
                self._shm.close()
                raise ValueError(
                    f"shared segment {name!r} holds {self._shm.size} bytes, "
                    f"{size} needed"
                )
        self._raw = self._shm.buf[:size]
        self._cells = self._raw.cast(_CELL_FORMAT)
        if create:
            self._cells[:] = memoryview(bytes(size)).cast(_CELL_FORMAT)

    @property
    def name(self) -> str:
        return self._shm.name

    @classmethod
    def create(cls, width: int, height: int) -> "SharedGrid":
        """Create a new zero-filled grid."""
        return cls(width, height, None, True)

    @classmethod
    def attach(cls, name: str, width: int, height: int) -> "SharedGrid":
        """Attach to a grid created elsewhere."""
        return cls(width, height, name, False)

    def _check_open(self) -> None:
        if self._cells is None:
            raise ValueError("grid is closed")

    def _row(self, row: int) -> int:
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} out of range")
        return row

    def _offset(self, key: tuple[int, int]) -> int:
        row, col = key
        self._row(row)
        if not 0 <= col < self.width:
            raise IndexError(f"column {col} out of range")
        return row * self.width + col

    def __getitem__(self, key):
        self._check_open()
        if isinstance(key, tuple):
            return self._cells[self._offset(key)]
        row = self._row(key)
        return self._cells[row * self.width:(row + 1) * self.width].tolist()

    def __setitem__(self, key, value) -> None:
        self._check_open()
        if isinstance(key, tuple):
            self._cells[self._offset(key)] = value
            return
        row = self._row(key)
        values: Sequence[int] = list(value)
        if len(values) != self.width:
            raise ValueError(f"row needs {self.width} values, got {len(values)}")
        base = row * self.width
        for col, cell in enumerate(values):
            self._cells[base + col] = cell

    def rows(self) -> list[list[int]]:
        """Return a copy of every row."""
        return [self[row] for row in range(self.height)]

    def close(self) -> None:
        """Detach from the segment."""
        if self._cells is None:
            return
        self._cells.release()
        self._raw.release()
        self._cells = None
        self._raw = None
        self._shm.close()

    def unlink(self) -> None:
        """Remove the segment from the system."""
        self._shm.unlink()

    def __enter__(self) -> "SharedGrid":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
        if self.owner:
            self.unlink()