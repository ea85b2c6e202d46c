"""Tests pour la détection des lignes de cinq."""

from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.pieces import Marker, Player, Ring
from yinsh.engine.runs import runs_of_five

from .board_test_utils import make_board, row

W = Player.WHITE
B = Player.BLACK


def _markers(coords, player=W):
    return {coord: Marker(player) for coord in coords}


def test_no_markers_no_runs(empty_board):
    assert runs_of_five(empty_board) == []


def test_exactly_five_is_reported_once():
    board = make_board(_markers(row(-2, -1, 0, 1, 2)))
    assert runs_of_five(board) == [frozenset(row(-2, -1, 0, 1, 2))]


def test_four_is_not_a_run():
    board = make_board(_markers(row(-2, -1, 0, 1)))
    assert runs_of_five(board) == []


def test_six_contains_no_run_of_five():
    """Une ligne contiguë maximale de six n'est pas une ligne de cinq."""
    board = make_board(_markers(row(-3, -2, -1, 0, 1, 2)))
    assert runs_of_five(board) == []


def test_run_ignores_marker_owner():
    cells = {**_markers(row(-2, -1, 0), W), **_markers(row(1, 2), B)}
    board = make_board(cells)
    assert runs_of_five(board) == [frozenset(row(-2, -1, 0, 1, 2))]


def test_ring_interrupts_run():
    cells = {**_markers(row(-3, -2, -1, 1, 2)), Coordinate(0, 0): Ring(W)}
    assert runs_of_five(make_board(cells)) == []


def test_crossing_runs_share_a_cell():
    horizontal = row(-2, -1, 0, 1, 2)
    vertical = [Coordinate(0, r) for r in range(-2, 3)]
    board = make_board(_markers(horizontal + vertical))

    runs = runs_of_five(board)

    assert len(runs) == 2
    assert frozenset(horizontal) in runs
    assert frozenset(vertical) in runs
    assert all(Coordinate(0, 0) in run for run in runs)


def test_diagonal_run():
    diagonal = [Coordinate(k, -k) for k in range(-2, 3)]
    board = make_board(_markers(diagonal, B))
    assert runs_of_five(board) == [frozenset(diagonal)]
