# game.py
from __future__ import annotations

import random
from typing import Optional

from .config import (
    MIN_GRID_W, MIN_GRID_H,
    NO_BORDER_CHANCE, SIDE_BORDER_CHANCE, TOP_BOTTOM_BORDER_CHANCE,
)
from .errors import FieldFullError, IllegalMoveError, InvariantViolation, SnakeGameError
from .field import Cell, CellKind, Field
from .geometry import Direction, Location, Size
from .snake import Snake

__all__ = [
    "Game", "SnakeGameError", "IllegalMoveError", "FieldFullError", "InvariantViolation",
]


class Game:
    """
    Owns the field, the snake, the score and the random source.

    Typical driver usage: call prepare_level() once, then handle_next_step()
    on a fixed cadence; on SnakeGameError call prepare_level() again.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        if width < MIN_GRID_W or height < MIN_GRID_H:
            raise ValueError(
                f"Field must be at least {MIN_GRID_W}x{MIN_GRID_H}, got {width}x{height}"
            )
        self._field = Field(width, height)
        self._snake = Snake(head=Location(0, 0), tail=Location(0, 0))
        self._score = 0
        self.rng = rng if rng is not None else random.Random(seed)

    # ---------- Read-only accessors ----------
    def field(self) -> Field:
        return self._field

    def size(self) -> Size:
        return self._field.size()

    def cell(self, x: int, y: int) -> Cell:
        return self._field.get(x, y)

    def snake_head_location(self) -> Location:
        return self._snake.head

    def snake_tail_location(self) -> Location:
        return self._snake.tail

    def head_direction(self) -> Direction:
        return self._snake.head_direction(self._field)

    def snake_length(self) -> int:
        return self._snake.length(self._field)

    def score(self) -> int:
        return self._score

    # ---------- Level setup ----------
    def prepare_level(self) -> None:
        self._field.reset()
        self.generate_blocks()
        self.generate_snake()
        self.generate_food()
        self._score = 0

    def generate_blocks(self) -> None:
        """Randomly wall off the left/right and/or top/bottom edges."""
        if self.rng.random() < NO_BORDER_CHANCE:
            return

        size = self._field.size()
        if self.rng.random() < SIDE_BORDER_CHANCE:
            for y in range(size.height):
                self._field.set(0, y, Cell.BLOCK)
                self._field.set(size.width - 1, y, Cell.BLOCK)

        if self.rng.random() < TOP_BOTTOM_BORDER_CHANCE:
            for x in range(size.width):
                self._field.set(x, 0, Cell.BLOCK)
                self._field.set(x, size.height - 1, Cell.BLOCK)

    def generate_snake(self) -> None:
        """Two-cell snake in the middle row, heading right."""
        size = self._field.size()
        row = size.height // 2
        head = Location(size.width // 2, row)
        tail = Location(head.x - 1, row)

        self._field.set_location(head, Cell.snake(Direction.RIGHT))
        self._field.set_location(tail, Cell.snake(Direction.RIGHT))
        self._snake = Snake(head=head, tail=tail)

    def generate_food(self) -> Location:
        """
        Draw a countdown in [0, area) and walk the empty cells in row-major
        order (wrapping around) until it runs out; food goes there.
        """
        empty = self._field.empty_indices()
        if empty.size == 0:
            raise FieldFullError("No empty cell left for food")

        countdown = self.rng.randrange(self._field.size().area)
        # 0-based: a countdown of 0 picks the first empty cell
        location = self._field.location_of(int(empty[countdown % empty.size]))
        self._field.set_location(location, Cell.FOOD)
        return location

    # ---------- Step ----------
    def handle_next_step(self, direction: Direction) -> None:
        """
        Advance the snake one cell. Raises IllegalMoveError (leaving the
        game untouched) when the snake would hit a block or itself.
        """
        head_direction = self._resolve_direction(direction)
        next_location = head_direction.next_location(self._snake.head, self._field.size())

        if not self.is_snake_next_location_allowed(next_location):
            raise IllegalMoveError(
                f"Cannot move {head_direction.name} from {self._snake.head} to {next_location}"
            )

        # The turn is only recorded once the move is known to be legal.
        self._field.set_location(self._snake.head, Cell.snake(head_direction))

        if self._field.get_location(next_location).kind is CellKind.FOOD:
            self._score += 1
            self._grow_snake(next_location)
            self.generate_food()
        else:
            self._move_snake(next_location)

    def is_snake_next_location_allowed(self, location: Location) -> bool:
        cell = self._field.get_location(location)
        if cell.kind is CellKind.BLOCK:
            return False
        if cell.is_snake:
            # The tail moves away during this same step.
            return location == self._snake.tail
        return True

    # ---------- Helpers ----------
    def _resolve_direction(self, requested: Direction) -> Direction:
        """Requested direction, unless it would reverse the snake onto itself."""
        current = self._snake.head_direction(self._field)
        if requested == current.opposite():
            return current
        return requested

    def _move_snake(self, next_location: Location) -> None:
        head_direction = self._snake.head_direction(self._field)
        tail_direction = self._snake.tail_direction(self._field)
        tail_next = tail_direction.next_location(self._snake.tail, self._field.size())

        self._field.set_location(self._snake.tail, Cell.EMPTY)
        self._field.set_location(next_location, Cell.snake(head_direction))

        self._snake.head = next_location
        self._snake.tail = tail_next

    def _grow_snake(self, next_location: Location) -> None:
        head_direction = self._snake.head_direction(self._field)
        self._field.set_location(next_location, Cell.snake(head_direction))
        self._snake.head = next_location
