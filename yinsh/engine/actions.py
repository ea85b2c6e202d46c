"""Actions du jeu.

Chaque action est une intention émise par un joueur; elle n'est acceptée
que dans la phase correspondante (voir `yinsh.engine.state`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.pieces import Player


@dataclass(frozen=True)
class Action:
    """Action de base."""

    pass


@dataclass(frozen=True)
class PlaceRing(Action):
    """Pose un anneau pendant la mise en place.

    Args:
        at: Intersection vide visée
    """

    at: Coordinate


@dataclass(frozen=True)
class PlaceMarker(Action):
    """Pose un pion dans un de ses anneaux (qui devra ensuite bouger).

    Args:
        at: Cellule de l'anneau
    """

    at: Coordinate


@dataclass(frozen=True)
class MoveRing(Action):
    """Fait glisser l'anneau depuis `origin` jusqu'à `destination`."""

    origin: Coordinate
    destination: Coordinate


@dataclass(frozen=True)
class RemoveRun(Action):
    """Retire une ligne de cinq pions.

    Args:
        cells: Coordonnées de la ligne choisie
        player: Joueur qui retire la ligne
    """

    cells: FrozenSet[Coordinate]
    player: Player


__all__ = [
    "Action",
    "PlaceRing",
    "PlaceMarker",
    "MoveRing",
    "RemoveRun",
]
