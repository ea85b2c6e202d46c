import math

from yinsh.engine.board import Board
from yinsh.engine.hexgrid import Coordinate
from yinsh.gui.geometry import BoardGeometry


def test_board_geometry_margin_alignment() -> None:
    board = Board.empty(4.6)
    geometry = BoardGeometry(board, cell_size=50.0, margin=24.0)

    positions = [geometry.position(coord) for coord in board.coordinates()]

    assert math.isclose(min(x for x, _ in positions), 24.0, abs_tol=1e-6)
    assert math.isclose(min(y for _, y in positions), 24.0, abs_tol=1e-6)


def test_neighbours_are_one_cell_apart() -> None:
    geometry = BoardGeometry(Board.empty(4.6), cell_size=70.0, margin=20.0)
    ax, ay = geometry.position(Coordinate(0, 0))
    bx, by = geometry.position(Coordinate(0, 1))
    assert math.isclose(math.hypot(bx - ax, by - ay), 70.0, abs_tol=1e-6)


def test_position_at_finds_nearest_cell() -> None:
    geometry = BoardGeometry(Board.empty(4.6), cell_size=60.0, margin=30.0)
    x, y = geometry.position(Coordinate(2, -1))

    assert geometry.position_at(x + 5, y - 5) == Coordinate(2, -1)
    assert geometry.position_at(0, 0) is None


def test_surface_size_is_symmetric() -> None:
    radius = 80.0
    margin = 30.0
    geometry = BoardGeometry(Board.empty(4.6), cell_size=radius, margin=margin)
    width, _ = geometry.surface_size
    centre_x, _ = geometry.position(Coordinate(0, 0))
    assert math.isclose(width, centre_x * 2, abs_tol=1e-6)
