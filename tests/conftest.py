import pytest

from torus_snake.game import Game
from torus_snake.geometry import Location


@pytest.fixture
def game() -> Game:
    """10x10 game with the starting snake, no blocks and no food."""
    g = Game(10, 10, seed=1234)
    g.field().reset()
    g.generate_snake()
    return g


@pytest.fixture
def start():
    return Location(5, 5), Location(4, 5)
