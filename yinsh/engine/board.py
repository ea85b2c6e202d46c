"""Plateau Yinsh: stockage immuable des cellules.

Le plateau associe à chaque intersection de la région hexagonale son contenu
(`Occupant`). Les coordonnées hors région n'existent pas: `get` retourne
`None`, ce qui est distinct d'une cellule `Empty`.

Toute modification retourne un nouveau plateau (copie à l'écriture), ce qui
permet aux lecteurs (moteur de déplacement, détecteur de lignes, rendu) de
conserver un instantané stable.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, Dict, List, Optional, Tuple

from yinsh.engine.hexgrid import AXES, DIRECTIONS, Coordinate, cells_within, direction_between, walk
from yinsh.engine.pieces import EMPTY, Occupant

CellPredicate = Callable[[Occupant], bool]


class Board:
    """Représentation immuable du plateau."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Dict[Coordinate, Occupant]) -> None:
        self._cells: Dict[Coordinate, Occupant] = dict(cells)

    @classmethod
    def empty(cls, radius: float) -> "Board":
        """Plateau vide couvrant toutes les intersections à distance <= radius."""
        if radius < 1:
            raise ValueError(f"Rayon de plateau invalide: {radius}")
        return cls({coord: EMPTY for coord in cells_within(radius)})

    # -- Lecture --
    def get(self, coord: Coordinate) -> Optional[Occupant]:
        return self._cells.get(coord)

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(frozenset(self._cells.items()))

    def __repr__(self) -> str:
        occupied = sum(1 for occupant in self._cells.values() if occupant != EMPTY)
        return f"Board(cells={len(self._cells)}, occupied={occupied})"

    def positions(self) -> List[Tuple[Coordinate, Occupant]]:
        """Toutes les cellules, triées par coordonnée."""
        return sorted(self._cells.items(), key=lambda item: item[0])

    def coordinates(self) -> List[Coordinate]:
        return sorted(self._cells)

    # -- Écriture (copie) --
    def set(self, coord: Coordinate, occupant: Occupant) -> "Board":
        """Retourne un nouveau plateau où `coord` contient `occupant`.

        Raises:
            KeyError: si la coordonnée est hors plateau
        """
        if coord not in self._cells:
            raise KeyError(coord)
        cells = dict(self._cells)
        cells[coord] = occupant
        return Board(cells)

    def update(self, changes: Dict[Coordinate, Occupant]) -> "Board":
        """Applique plusieurs changements en une seule copie."""
        missing = [coord for coord in changes if coord not in self._cells]
        if missing:
            raise KeyError(missing[0])
        cells = dict(self._cells)
        cells.update(changes)
        return Board(cells)

    # -- Rayons et lignes --
    def ray(self, origin: Coordinate, direction: Coordinate) -> Tuple[Coordinate, ...]:
        """Cellules depuis `origin` (exclue) jusqu'au bord, dans l'ordre."""
        return tuple(takewhile(lambda coord: coord in self._cells, walk(origin, direction)))

    def rays_from(self, origin: Coordinate) -> Tuple[Tuple[Coordinate, ...], ...]:
        """Les six rayons partant de `origin`."""
        return tuple(self.ray(origin, direction) for direction in DIRECTIONS)

    def line(self, start: Coordinate, end: Coordinate) -> Tuple[Coordinate, ...]:
        """Cellules strictement entre `start` et `end`, ordonnées depuis `start`.

        Retourne un tuple vide si les deux coordonnées ne sont pas alignées
        sur un axe hexagonal.
        """
        direction = direction_between(start, end)
        if direction is None:
            return ()
        between: List[Coordinate] = []
        for coord in walk(start, direction):
            if coord == end:
                break
            between.append(coord)
        return tuple(between)

    def contiguous_lines(
        self, coord: Coordinate, predicate: CellPredicate
    ) -> List[Tuple[Coordinate, ...]]:
        """Lignes maximales de cellules satisfaisant `predicate` passant par `coord`.

        Une ligne par axe de symétrie (trois au plus), ordonnée le long de
        l'axe. Liste vide si `coord` elle-même ne satisfait pas le prédicat.
        """
        occupant = self.get(coord)
        if occupant is None or not predicate(occupant):
            return []

        def matches(candidate: Coordinate) -> bool:
            found = self.get(candidate)
            return found is not None and predicate(found)

        lines: List[Tuple[Coordinate, ...]] = []
        for forward, backward in AXES:
            behind = list(takewhile(matches, walk(coord, backward)))
            ahead = list(takewhile(matches, walk(coord, forward)))
            lines.append(tuple(reversed(behind)) + (coord,) + tuple(ahead))
        return lines


__all__ = ["Board", "CellPredicate"]
