"""Géométrie de la grille hexagonale (coordonnées axiales).

Le plateau Yinsh est un réseau triangulaire: chaque intersection est repérée
par une coordonnée axiale `(q, r)`. Ce module fournit:
- le type valeur `Coordinate` (égalité et ordre structurels)
- les six directions et les trois axes de symétrie
- la conversion axiale -> cartésienne pour le rendu
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

_SQRT3_2: float = math.sqrt(3.0) / 2.0
_FORMAT_PRECISION = 3


@dataclass(frozen=True, order=True)
class Coordinate:
    q: int
    r: int

    def __add__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.q + other.q, self.r + other.r)

    def __sub__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(self.q - other.q, self.r - other.r)


# Ordre fixe: est, nord-est, nord-ouest, ouest, sud-ouest, sud-est
DIRECTIONS: Tuple[Coordinate, ...] = (
    Coordinate(1, 0),
    Coordinate(1, -1),
    Coordinate(0, -1),
    Coordinate(-1, 0),
    Coordinate(-1, 1),
    Coordinate(0, 1),
)

# Un axe = une direction et son opposée
AXES: Tuple[Tuple[Coordinate, Coordinate], ...] = (
    (DIRECTIONS[0], DIRECTIONS[3]),
    (DIRECTIONS[1], DIRECTIONS[4]),
    (DIRECTIONS[2], DIRECTIONS[5]),
)

ORIGIN = Coordinate(0, 0)


def norm(coord: Coordinate) -> int:
    """Distance cartésienne au carré depuis l'origine (espacement unitaire)."""

    return coord.q * coord.q + coord.q * coord.r + coord.r * coord.r


def to_cartesian(scale: float, coord: Coordinate) -> Tuple[float, float]:
    """Convertit une coordonnée axiale en position cartésienne.

    Args:
        scale: Distance entre deux intersections voisines
        coord: Coordonnée axiale

    Returns:
        (x, y) avec l'origine au centre du plateau
    """
    x = scale * (coord.q + coord.r / 2)
    y = scale * _SQRT3_2 * coord.r
    return x, y


def format_coordinate(coord: Coordinate) -> Tuple[str, str]:
    """Position cartésienne unitaire formatée pour l'affichage."""

    x, y = to_cartesian(1.0, coord)
    return f"{x:.{_FORMAT_PRECISION}f}", f"{y:.{_FORMAT_PRECISION}f}"


def cells_within(radius: float) -> List[Coordinate]:
    """Toutes les intersections à distance <= radius du centre, triées.

    Avec le rayon par défaut (4.6) on obtient les 85 intersections du
    plateau classique.
    """
    bound = int(math.ceil(radius * 2))
    limit = radius * radius
    cells = [
        Coordinate(q, r)
        for q in range(-bound, bound + 1)
        for r in range(-bound, bound + 1)
        if norm(Coordinate(q, r)) <= limit
    ]
    return sorted(cells)


def direction_between(start: Coordinate, end: Coordinate) -> Coordinate | None:
    """Direction unitaire reliant deux coordonnées alignées (None sinon)."""

    delta = end - start
    if delta == ORIGIN:
        return None
    if delta.q != 0 and delta.r != 0 and delta.q != -delta.r:
        return None
    step = Coordinate(_sign(delta.q), _sign(delta.r))
    return step


def walk(start: Coordinate, direction: Coordinate) -> Iterator[Coordinate]:
    """Itère indéfiniment les cellules à partir de `start` (exclu)."""

    current = start + direction
    while True:
        yield current
        current = current + direction


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


__all__ = [
    "Coordinate",
    "DIRECTIONS",
    "AXES",
    "ORIGIN",
    "norm",
    "to_cartesian",
    "format_coordinate",
    "cells_within",
    "direction_between",
    "walk",
]
