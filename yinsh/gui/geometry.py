"""Geometry utilities for board rendering.

Ce module fournit la classe BoardGeometry qui calcule les coordonnées écran
des intersections à partir des coordonnées axiales du Board, et retrouve
l'intersection la plus proche d'un clic.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from yinsh.engine.board import Board
from yinsh.engine.hexgrid import Coordinate, to_cartesian


class BoardGeometry:
    """Compute screen coordinates from logical board positions."""

    def __init__(self, board: Board, cell_size: float, margin: float) -> None:
        """Initialize geometry calculator.

        Args:
            board: Game board
            cell_size: Distance between two neighbouring intersections in pixels
            margin: Margin around the board in pixels
        """
        self.cell_size = cell_size
        self.margin = margin

        self._positions: Dict[Coordinate, Tuple[float, float]] = {}
        self._compute_positions(board)

    def _compute_positions(self, board: Board) -> None:
        """Compute screen positions for all cells with margin alignment."""
        scaled = {coord: to_cartesian(self.cell_size, coord) for coord in board.coordinates()}

        min_x = min(x for x, _ in scaled.values())
        min_y = min(y for _, y in scaled.values())

        self._positions = {
            coord: (x - min_x + self.margin, y - min_y + self.margin)
            for coord, (x, y) in scaled.items()
        }

    def position(self, coord: Coordinate) -> Tuple[float, float]:
        """Get screen position for a cell.

        Raises:
            KeyError: if the coordinate is not on the board
        """
        return self._positions[coord]

    def position_at(self, x: float, y: float, tolerance: float | None = None) -> Optional[Coordinate]:
        """Return the cell closest to (x, y), or None if farther than tolerance.

        The default tolerance is half the cell size, so each click maps to at
        most one intersection.
        """
        if tolerance is None:
            tolerance = self.cell_size / 2
        best: Optional[Coordinate] = None
        best_distance = tolerance
        for coord, (px, py) in self._positions.items():
            distance = math.hypot(px - x, py - y)
            if distance <= best_distance:
                best = coord
                best_distance = distance
        return best

    @property
    def surface_size(self) -> Tuple[float, float]:
        """Get the required surface size to contain the board."""
        max_x = max(x for x, _ in self._positions.values())
        max_y = max(y for _, y in self._positions.values())
        return (max_x + self.margin, max_y + self.margin)


__all__ = ["BoardGeometry"]
