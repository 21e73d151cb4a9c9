# snake.py
from dataclasses import dataclass
from typing import Iterator

from .errors import InvariantViolation
from .field import Field
from .geometry import Direction, Location


@dataclass
class Snake:
    """
    Only the two endpoints are stored. The body lives in the field: each
    snake cell holds the direction towards the next segment, so walking
    from the tail along those directions ends at the head.
    """
    head: Location
    tail: Location

    def head_direction(self, field: Field) -> Direction:
        return self._cell_direction(self.head, field)

    def tail_direction(self, field: Field) -> Direction:
        return self._cell_direction(self.tail, field)

    def segments(self, field: Field) -> Iterator[Location]:
        """Yield body locations from tail to head."""
        size = field.size()
        location = self.tail
        for _ in range(size.area):
            direction = self._cell_direction(location, field)
            yield location
            if location == self.head:
                return
            location = direction.next_location(location, size)
        raise InvariantViolation(f"Snake body from {self.tail} never reaches head {self.head}")

    def length(self, field: Field) -> int:
        return sum(1 for _ in self.segments(field))

    @staticmethod
    def _cell_direction(location: Location, field: Field) -> Direction:
        cell = field.get_location(location)
        if not cell.is_snake:
            raise InvariantViolation(f"Expected a snake cell at {location}, found {cell.kind.name}")
        return cell.direction
