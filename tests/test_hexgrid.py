import math

from yinsh.engine.hexgrid import (
    AXES,
    DIRECTIONS,
    Coordinate,
    cells_within,
    direction_between,
    format_coordinate,
    norm,
    to_cartesian,
)


def test_coordinate_is_structural_value() -> None:
    assert Coordinate(1, 2) == Coordinate(1, 2)
    assert hash(Coordinate(1, 2)) == hash(Coordinate(1, 2))
    assert Coordinate(0, 5) < Coordinate(1, -5)
    assert Coordinate(1, -1) + Coordinate(2, 3) == Coordinate(3, 2)


def test_directions_are_unit_and_axes_opposite() -> None:
    assert len(DIRECTIONS) == 6
    assert all(norm(direction) == 1 for direction in DIRECTIONS)
    for forward, backward in AXES:
        assert forward + backward == Coordinate(0, 0)


def test_to_cartesian_neighbours_are_equidistant() -> None:
    origin = to_cartesian(10.0, Coordinate(0, 0))
    assert origin == (0.0, 0.0)
    for direction in DIRECTIONS:
        x, y = to_cartesian(10.0, direction)
        assert math.isclose(math.hypot(x, y), 10.0)


def test_format_coordinate() -> None:
    assert format_coordinate(Coordinate(1, 0)) == ("1.000", "0.000")
    assert format_coordinate(Coordinate(0, 2)) == ("1.000", "1.732")


def test_default_radius_gives_classic_board() -> None:
    cells = cells_within(4.6)
    assert len(cells) == 85
    assert cells == sorted(cells)
    assert Coordinate(0, 0) in cells
    # Les six pointes de l'hexagone (distance 5) sont exclues
    assert Coordinate(5, 0) not in cells
    assert Coordinate(4, 0) in cells


def test_direction_between() -> None:
    assert direction_between(Coordinate(0, 0), Coordinate(3, 0)) == Coordinate(1, 0)
    assert direction_between(Coordinate(2, -2), Coordinate(0, 0)) == Coordinate(-1, 1)
    assert direction_between(Coordinate(0, 0), Coordinate(0, -4)) == Coordinate(0, -1)
    assert direction_between(Coordinate(0, 0), Coordinate(1, 1)) is None
    assert direction_between(Coordinate(0, 0), Coordinate(0, 0)) is None
