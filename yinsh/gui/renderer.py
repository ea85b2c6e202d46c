"""BoardRenderer: rendu pygame du plateau et des pièces.

Responsabilités:
- Dessiner les lignes de la grille et les intersections
- Dessiner anneaux (cercles évidés) et pions (disques pleins)
- Gérer les surbrillances contextuelles (positions cliquables, destinations)

Conventions visuelles:
- Blanc = disque clair bordé de noir, Noir = disque sombre bordé de clair
- Les couleurs des glyphes viennent de `yinsh.gui.controller.glyph_for`
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pygame

from yinsh.engine.board import Board
from yinsh.engine.hexgrid import AXES, Coordinate
from yinsh.engine.pieces import Player
from yinsh.gui.controller import Glyph, GlyphShape, glyph_for
from yinsh.gui.geometry import BoardGeometry


# Constantes écran
SCREEN_WIDTH = 900
SCREEN_HEIGHT = 900
HUD_HEIGHT = 60

# Constantes plateau
CELL_SIZE = 80  # distance entre deux intersections voisines
BOARD_MARGIN = 60

# Couleurs
COLOR_BG = (214, 178, 120)
COLOR_GRID = (90, 60, 30)
COLOR_DOT = (90, 60, 30)
COLOR_TEXT = (20, 20, 20)
COLOR_HIGHLIGHT = (100, 255, 100, 140)  # Vert semi-transparent
COLOR_PREVIEW = (120, 180, 255, 140)  # Bleu semi-transparent
COLOR_RUN = (255, 90, 90, 160)  # Rouge semi-transparent

# Couleurs joueurs: (remplissage, contour)
COLOR_PLAYERS: Dict[Player, Tuple[Tuple[int, int, int], Tuple[int, int, int]]] = {
    Player.WHITE: ((240, 240, 235), (20, 20, 20)),
    Player.BLACK: ((30, 30, 30), (230, 230, 230)),
}

# Tailles pièces
GRID_WIDTH = 2
DOT_RADIUS = 4
RING_RADIUS = 30
RING_WIDTH = 9
MARKER_RADIUS = 18
HIGHLIGHT_RADIUS = 14


class BoardRenderer:
    """Rendu du plateau et des pièces."""

    def __init__(self, screen: pygame.Surface, geometry: BoardGeometry) -> None:
        """Initialize renderer with pygame surface and board geometry.

        Args:
            screen: pygame surface to draw on
            geometry: logical -> screen coordinate mapping
        """
        self.screen = screen
        self.geometry = geometry

        # Font for the HUD (lazy init on first render)
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> pygame.font.Font:
        """Lazy init font."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont("Arial", 22, bold=True)
        return self._font

    def _screen_pos(self, coord: Coordinate) -> Tuple[int, int]:
        x, y = self.geometry.position(coord)
        return int(x), int(y)

    def render_board(self, board: Board) -> None:
        """Render the background and the grid lines between neighbours."""
        self.screen.fill(COLOR_BG)
        for coord in board.coordinates():
            start = self._screen_pos(coord)
            # Une seule direction par axe pour ne tracer chaque segment qu'une fois
            for forward, _ in AXES:
                neighbour = coord + forward
                if neighbour in board:
                    pygame.draw.line(
                        self.screen, COLOR_GRID, start, self._screen_pos(neighbour), GRID_WIDTH
                    )

    def render_pieces(self, board: Board) -> None:
        """Render rings, markers and empty intersections."""
        for coord, occupant in board.positions():
            self._draw_glyph(coord, glyph_for(occupant))

    def _draw_glyph(self, coord: Coordinate, glyph: Glyph) -> None:
        pos = self._screen_pos(coord)
        if glyph.shape is GlyphShape.DOT or glyph.player is None:
            pygame.draw.circle(self.screen, COLOR_DOT, pos, DOT_RADIUS)
            return

        fill, outline = COLOR_PLAYERS[glyph.player]
        if glyph.shape is GlyphShape.RING:
            pygame.draw.circle(self.screen, outline, pos, RING_RADIUS + 1, width=RING_WIDTH + 2)
            pygame.draw.circle(self.screen, fill, pos, RING_RADIUS, width=RING_WIDTH)
        else:
            pygame.draw.circle(self.screen, fill, pos, MARKER_RADIUS)
            pygame.draw.circle(self.screen, outline, pos, MARKER_RADIUS, width=2)

    def render_highlights(
        self,
        coords: Iterable[Coordinate],
        color: Tuple[int, int, int, int] = COLOR_HIGHLIGHT,
    ) -> None:
        """Draw semi-transparent discs over the given intersections."""
        diameter = HIGHLIGHT_RADIUS * 2
        overlay = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        pygame.draw.circle(overlay, color, (HIGHLIGHT_RADIUS, HIGHLIGHT_RADIUS), HIGHLIGHT_RADIUS)
        for coord in coords:
            x, y = self._screen_pos(coord)
            self.screen.blit(overlay, (x - HIGHLIGHT_RADIUS, y - HIGHLIGHT_RADIUS))

    def render_instructions(self, text: str) -> None:
        """Draw the instruction line at the bottom of the screen."""
        font = self._ensure_font()
        label = font.render(text, True, COLOR_TEXT)
        rect = label.get_rect(
            center=(self.screen.get_width() // 2, self.screen.get_height() - HUD_HEIGHT // 2)
        )
        self.screen.blit(label, rect)


__all__ = [
    "BoardRenderer",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "CELL_SIZE",
    "BOARD_MARGIN",
    "COLOR_BG",
    "COLOR_HIGHLIGHT",
    "COLOR_PREVIEW",
    "COLOR_RUN",
]
