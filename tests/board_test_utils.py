"""Utilitaires de construction de plateaux pour les tests.

La rangée centrale (r = 0) va de q = -4 à q = 4: la plupart des scénarios
s'y déroulent pour rester lisibles.
"""

from __future__ import annotations

from typing import Dict, List

from yinsh.engine.board import Board
from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.pieces import Occupant
from yinsh.engine.rules import BOARD_RADIUS


def make_board(cells: Dict[Coordinate, Occupant]) -> Board:
    """Plateau standard vide complété par `cells`."""
    return Board.empty(BOARD_RADIUS).update(cells)


def row(*qs: int) -> List[Coordinate]:
    """Coordonnées de la rangée centrale (r = 0)."""
    return [Coordinate(q, 0) for q in qs]
