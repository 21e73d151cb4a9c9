from torus_snake.field import Cell, CellKind
from torus_snake.game import Game
from torus_snake.geometry import Direction


class ScriptedRandom:
    """Stand-in rng: random() replays values, randrange() returns a fixed number."""

    def __init__(self, values=(), choice=0):
        self._values = list(values)
        self._choice = choice

    def random(self):
        return self._values.pop(0)

    def randrange(self, stop):
        return self._choice


def clear_food(game: Game) -> None:
    for loc in game.field().locations(CellKind.FOOD):
        game.field().set_location(loc, Cell.EMPTY)


def feed(game: Game, direction: Direction) -> None:
    """Put food right in front of the head (after turning) and step onto it."""
    current = game.head_direction()
    if direction == current.opposite():
        direction = current
    target = direction.next_location(game.snake_head_location(), game.size())
    clear_food(game)
    game.field().set_location(target, Cell.FOOD)
    game.handle_next_step(direction)
    clear_food(game)
