"""Orchestrateur principal de la GUI Yinsh.

Ce module relie GameService, BoardController et BoardRenderer et fournit
un modèle testable indépendant de la boucle pygame:
- un objet `YinshApp` qui reçoit clics et mouvements de souris,
- un état d'interface (`UIState`) synthétisant les surbrillances et
  instructions à afficher.

L'état d'interaction (survol) vit uniquement ici et dans le contrôleur,
jamais dans `GameState`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Optional

import pygame

from yinsh.app.game_service import GameService
from yinsh.engine.hexgrid import Coordinate, format_coordinate
from yinsh.engine.pieces import Player
from yinsh.engine.rules import BOARD_RADIUS, FIRST_PLAYER, INITIAL_RINGS_REMAINING
from yinsh.engine.state import GameState, Phase
from yinsh.gui.controller import BoardController
from yinsh.gui.geometry import BoardGeometry
from yinsh.gui.renderer import (
    BOARD_MARGIN,
    CELL_SIZE,
    COLOR_PREVIEW,
    COLOR_RUN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BoardRenderer,
)

__all__ = ["UIState", "YinshApp"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UIState:
    """Données agrégées pour la couche de présentation GUI."""

    phase: Phase
    current_player: Player
    instructions: str
    highlight_positions: FrozenSet[Coordinate]
    preview_destinations: FrozenSet[Coordinate]
    hovered_run: FrozenSet[Coordinate]
    hovered: Optional[Coordinate]


class YinshApp:
    """Orchestrateur principal de la GUI.

    Cette classe ne gère pas la boucle pygame directement mais fournit
    les opérations nécessaires à l'UI:
    - démarrer une partie,
    - gérer les clics et survols (en pixels ou en coordonnées),
    - exposer un état synthétique prêt à rendre.
    """

    def __init__(
        self,
        *,
        game_service: Optional[GameService] = None,
        screen: Optional[pygame.Surface] = None,
        cell_size: float = CELL_SIZE,
        margin: float = BOARD_MARGIN,
    ) -> None:
        self.game_service = game_service or GameService()
        self.screen = screen
        self.cell_size = cell_size
        self.margin = margin

        self.geometry: Optional[BoardGeometry] = None
        self.controller: Optional[BoardController] = None
        self._board_renderer: Optional[BoardRenderer] = None

    # ------------------------------------------------------------------
    # Initialisation & synchronisation
    # ------------------------------------------------------------------

    def start_new_game(
        self,
        *,
        radius: float = BOARD_RADIUS,
        rings_remaining: int = INITIAL_RINGS_REMAINING,
        first_player: Player = FIRST_PLAYER,
    ) -> None:
        """Initialise une nouvelle partie et (ré)instancie le contrôleur."""

        state = self.game_service.start_new_game(
            radius=radius,
            rings_remaining=rings_remaining,
            first_player=first_player,
        )

        if self.screen is None:
            # Crée une surface si non fournie (utile hors tests)
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))

        self.geometry = BoardGeometry(state.board, self.cell_size, self.margin)
        self._board_renderer = BoardRenderer(self.screen, self.geometry)
        self.controller = BoardController(self.game_service)

    @property
    def state(self) -> GameState:
        """Accès direct à l'état courant de la partie."""

        return self.game_service.state

    @property
    def renderer(self) -> BoardRenderer:
        """Retourne le renderer pygame associé (initialisé après start)."""

        if self._board_renderer is None:
            raise RuntimeError("BoardRenderer indisponible tant que la partie n'est pas démarrée")
        return self._board_renderer

    def _require_controller(self) -> BoardController:
        if self.controller is None:
            raise RuntimeError("App non initialisée: start_new_game() requis")
        return self.controller

    # ------------------------------------------------------------------
    # Gestion des entrées
    # ------------------------------------------------------------------

    def handle_board_click(self, coord: Coordinate) -> bool:
        """Gère un clic sur une intersection du plateau."""

        controller = self._require_controller()
        handled = controller.handle_click(coord)
        if handled:
            x, y = format_coordinate(coord)
            logger.debug("Clic %s (%s, %s) accepté, phase: %s", coord, x, y, self.state.phase)
        return handled

    def handle_screen_click(self, x: float, y: float) -> bool:
        """Gère un clic en pixels; hors intersection, le clic est ignoré."""

        self._require_controller()
        assert self.geometry is not None
        coord = self.geometry.position_at(x, y)
        if coord is None:
            return False
        return self.handle_board_click(coord)

    def handle_mouse_motion(self, x: float, y: float) -> None:
        controller = self._require_controller()
        assert self.geometry is not None
        controller.handle_hover(self.geometry.position_at(x, y))

    # ------------------------------------------------------------------
    # État UI & rendu
    # ------------------------------------------------------------------

    def get_ui_state(self) -> UIState:
        """Construit l'état de présentation courant."""

        controller = self._require_controller()
        state = self.state
        return UIState(
            phase=state.phase,
            current_player=state.current_player,
            instructions=controller.get_instructions(),
            highlight_positions=frozenset(controller.get_clickable_positions()),
            preview_destinations=frozenset(controller.get_preview_destinations()),
            hovered_run=frozenset(controller.get_hovered_run()),
            hovered=controller.hovered,
        )

    def render(self) -> None:
        """Dessine l'état courant sur l'écran."""

        ui_state = self.get_ui_state()
        renderer = self.renderer
        board = self.state.board
        renderer.render_board(board)
        renderer.render_highlights(ui_state.highlight_positions)
        renderer.render_highlights(ui_state.preview_destinations, COLOR_PREVIEW)
        renderer.render_highlights(ui_state.hovered_run, COLOR_RUN)
        renderer.render_pieces(board)
        renderer.render_instructions(ui_state.instructions)
