# src/torus_snake/__init__.py
"""Toroidal grid snake: game core plus a small pygame driver."""

from .geometry import Direction, Location, Size
from .field import Cell, CellKind, Field
from .game import (
    FieldFullError,
    Game,
    IllegalMoveError,
    InvariantViolation,
    SnakeGameError,
)

__all__ = [
    "Cell", "CellKind", "Direction", "Field", "FieldFullError", "Game",
    "IllegalMoveError", "InvariantViolation", "Location", "Size", "SnakeGameError",
]
