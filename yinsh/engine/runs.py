"""Détection des lignes de cinq pions.

Les lignes sont détectées sur la présence de pions, sans regarder leur
face: une ligne mêlant les deux joueurs compte aussi. Seules les lignes
contiguës maximales de longueur exactement `RUN_LENGTH` sont retenues
(une ligne de six n'en produit aucune).
"""

from __future__ import annotations

from typing import FrozenSet, List

from yinsh.engine.board import Board
from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.pieces import Marker, Occupant
from yinsh.engine.rules import RUN_LENGTH

Run = FrozenSet[Coordinate]


def holds_marker(occupant: Occupant) -> bool:
    return isinstance(occupant, Marker)


def runs_of_five(board: Board, length: int = RUN_LENGTH) -> List[Run]:
    """Retourne les lignes complètes, dans l'ordre de parcours du plateau.

    Une même coordonnée peut figurer dans plusieurs lignes (croisement).
    Chaque ligne n'apparaît qu'une fois même si elle est retrouvée depuis
    chacune de ses cellules.
    """
    runs: List[Run] = []
    for coord, occupant in board.positions():
        if not holds_marker(occupant):
            continue
        for line in board.contiguous_lines(coord, holds_marker):
            if len(line) != length:
                continue
            run = frozenset(line)
            if run not in runs:
                runs.append(run)
    return runs


__all__ = ["Run", "holds_marker", "runs_of_five"]
