# geometry.py
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Location:
    x: int
    y: int


class Direction(Enum):
    """Grid directions as (dx, dy); y grows downwards like screen rows."""
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def next_location(self, location: Location, size: Size) -> Location:
        """Neighbouring cell one step away, wrapping around the grid edges."""
        dx, dy = self.value
        return Location(
            (location.x + dx) % size.width,
            (location.y + dy) % size.height,
        )


_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}
