from torus_snake.geometry import Direction, Location, Size

SIZE = Size(7, 5)


def test_area() -> None:
    assert SIZE.area == 35
    assert Size(1, 1).area == 1


def test_opposites() -> None:
    assert Direction.LEFT.opposite() is Direction.RIGHT
    assert Direction.RIGHT.opposite() is Direction.LEFT
    assert Direction.UP.opposite() is Direction.DOWN
    assert Direction.DOWN.opposite() is Direction.UP
    for d in Direction:
        assert d.opposite().opposite() is d


def test_interior_moves() -> None:
    loc = Location(3, 2)
    assert Direction.LEFT.next_location(loc, SIZE) == Location(2, 2)
    assert Direction.RIGHT.next_location(loc, SIZE) == Location(4, 2)
    assert Direction.UP.next_location(loc, SIZE) == Location(3, 1)
    assert Direction.DOWN.next_location(loc, SIZE) == Location(3, 3)


def test_wraps_on_every_edge() -> None:
    for y in range(SIZE.height):
        assert Direction.RIGHT.next_location(Location(SIZE.width - 1, y), SIZE) == Location(0, y)
        assert Direction.LEFT.next_location(Location(0, y), SIZE) == Location(SIZE.width - 1, y)
    for x in range(SIZE.width):
        assert Direction.DOWN.next_location(Location(x, SIZE.height - 1), SIZE) == Location(x, 0)
        assert Direction.UP.next_location(Location(x, 0), SIZE) == Location(x, SIZE.height - 1)


def test_locations_are_values() -> None:
    assert Location(1, 2) == Location(1, 2)
    assert len({Location(1, 2), Location(1, 2), Location(2, 1)}) == 2
