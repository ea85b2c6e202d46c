"""Joueurs et contenus de cellule.

Le contenu d'une cellule est une union étiquetée (`Occupant`):
- `Empty`: intersection libre
- `Ring(player)`: anneau seul sur la cellule
- `Marker(player)`: pion dont la face visible indique le joueur
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Player(Enum):
    """Les deux joueurs, qui alternent."""

    WHITE = "WHITE"
    BLACK = "BLACK"

    def next(self) -> "Player":
        return Player.BLACK if self is Player.WHITE else Player.WHITE


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Ring:
    player: Player


@dataclass(frozen=True)
class Marker:
    player: Player

    def flipped(self) -> "Marker":
        """Retourne le pion sur son autre face."""
        return Marker(self.player.next())


Occupant = Union[Empty, Ring, Marker]

EMPTY = Empty()


__all__ = ["Player", "Empty", "Ring", "Marker", "Occupant", "EMPTY"]
