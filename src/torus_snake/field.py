# field.py
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional

import numpy as np  # type: ignore

from .geometry import Direction, Location, Size


class CellKind(IntEnum):
    EMPTY = 0
    FOOD = 1
    BLOCK = 2
    SNAKE = 3


@dataclass(frozen=True)
class Cell:
    """
    Content of one grid cell.

    Snake cells carry the direction the snake travels through them, i.e.
    the step from this segment to the next one closer to the head.
    """
    kind: CellKind
    direction: Optional[Direction] = None

    @staticmethod
    def snake(direction: Direction) -> "Cell":
        return Cell(CellKind.SNAKE, direction)

    @property
    def is_snake(self) -> bool:
        return self.kind is CellKind.SNAKE


Cell.EMPTY = Cell(CellKind.EMPTY)
Cell.FOOD = Cell(CellKind.FOOD)
Cell.BLOCK = Cell(CellKind.BLOCK)

# ---------- int8 codes stored in the grid ----------
_DECODE = (
    Cell.EMPTY,
    Cell.FOOD,
    Cell.BLOCK,
    *(Cell.snake(d) for d in Direction),
)
_ENCODE = {cell: code for code, cell in enumerate(_DECODE)}
_SNAKE_BASE = int(CellKind.SNAKE)


class Field:
    """
    Fixed-size grid of cells stored row-major in a flat numpy array.

    Coordinates must be in bounds; that is the caller's contract and is
    only checked by assertions.
    """

    def __init__(self, width: int, height: int):
        self._size = Size(width, height)
        self._cells = np.zeros(self._size.area, dtype=np.int8)

    def size(self) -> Size:
        return self._size

    def get(self, x: int, y: int) -> Cell:
        return _DECODE[self._cells[self._index(x, y)]]

    def set(self, x: int, y: int, cell: Cell) -> None:
        self._cells[self._index(x, y)] = _ENCODE[cell]

    def get_location(self, location: Location) -> Cell:
        return self.get(location.x, location.y)

    def set_location(self, location: Location, cell: Cell) -> None:
        self.set(location.x, location.y, cell)

    def reset(self) -> None:
        self._cells.fill(_ENCODE[Cell.EMPTY])

    # ---------- Bulk reads ----------
    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self._mask(kind)))

    def locations(self, kind: CellKind) -> List[Location]:
        """Locations holding cells of *kind*, in row-major order."""
        return [self.location_of(int(i)) for i in np.flatnonzero(self._mask(kind))]

    def empty_indices(self) -> np.ndarray:
        return np.flatnonzero(self._mask(CellKind.EMPTY))

    def location_of(self, index: int) -> Location:
        assert 0 <= index < self._size.area, f"Cell index {index} out of bounds"
        return Location(index % self._size.width, index // self._size.width)

    def to_array(self) -> np.ndarray:
        """Copy of the raw cell codes shaped (height, width)."""
        return self._cells.reshape(self._size.height, self._size.width).copy()

    # ---------- Internals ----------
    def _mask(self, kind: CellKind) -> np.ndarray:
        if kind is CellKind.SNAKE:
            return self._cells >= _SNAKE_BASE
        return self._cells == int(kind)

    def _index(self, x: int, y: int) -> int:
        assert 0 <= x < self._size.width and 0 <= y < self._size.height, (
            f"Location ({x}, {y}) outside {self._size.width}x{self._size.height} field"
        )
        return y * self._size.width + x
