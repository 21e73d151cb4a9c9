# errors.py


class SnakeGameError(Exception):
    """A step could not be completed; the driver restarts the level."""


class IllegalMoveError(SnakeGameError):
    """The next head cell is a block or part of the snake's own body."""


class FieldFullError(SnakeGameError):
    """No empty cell is left to put food on."""


class InvariantViolation(AssertionError):
    """The grid no longer describes a valid snake. Not meant to be caught."""
