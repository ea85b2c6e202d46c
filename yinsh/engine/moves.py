"""Déplacement des anneaux (règle du saut).

Pour chaque rayon partant de l'anneau, la lecture se fait en trois états:
1. cellules vides en tête de rayon: chacune est une destination
2. pions contigus: l'anneau peut les sauter
3. terminal: première cellule vide après les pions (destination unique),
   ou arrêt sur un anneau / le bord
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence, Set

from yinsh.engine.board import Board
from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.pieces import Empty, Marker, Occupant, Player, Ring


class _ScanState(Enum):
    LEADING_EMPTY = "LEADING_EMPTY"
    MARKER_RUN = "MARKER_RUN"


def destinations_along(ray: Sequence[Coordinate], board: Board) -> Set[Coordinate]:
    """Destinations atteignables le long d'un rayon (origine exclue)."""

    destinations: Set[Coordinate] = set()
    state = _ScanState.LEADING_EMPTY
    for coord in ray:
        occupant = board.get(coord)
        if occupant is None or isinstance(occupant, Ring):
            break
        if isinstance(occupant, Marker):
            state = _ScanState.MARKER_RUN
            continue
        if state is _ScanState.MARKER_RUN:
            # Atterrissage juste après les pions sautés
            destinations.add(coord)
            break
        destinations.add(coord)
    return destinations


def available_moves(origin: Coordinate, board: Board) -> Set[Coordinate]:
    """Union des destinations légales sur les six rayons.

    Retourne un ensemble vide si l'origine est hors plateau ou si l'anneau
    est bloqué.
    """
    if origin not in board:
        return set()
    moves: Set[Coordinate] = set()
    for ray in board.rays_from(origin):
        moves |= destinations_along(ray, board)
    return moves


def valid_move(board: Board, origin: Coordinate, destination: Coordinate) -> bool:
    return destination in available_moves(origin, board)


def moveable_ring(
    board: Board,
    position: tuple[Coordinate, Optional[Occupant]],
    player: Player,
) -> bool:
    """Vrai si la cellule porte un anneau de `player` qui peut glisser."""

    coord, occupant = position
    if occupant != Ring(player):
        return False
    return bool(available_moves(coord, board))


def is_empty(occupant: Optional[Occupant]) -> bool:
    return isinstance(occupant, Empty)


__all__ = [
    "destinations_along",
    "available_moves",
    "valid_move",
    "moveable_ring",
    "is_empty",
]
