import pytest

from yinsh.engine.board import Board
from yinsh.engine.rules import BOARD_RADIUS


@pytest.fixture
def empty_board() -> Board:
    return Board.empty(BOARD_RADIUS)
