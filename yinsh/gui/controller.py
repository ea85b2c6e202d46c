"""Adaptateur de présentation: clics sur le plateau -> actions.

Ce module traduit, selon la phase courante, chaque intersection en une
action proposée (ou aucune), et chaque contenu de cellule en glyphe à
dessiner. Il ne contient aucune règle: la légalité vient de
`yinsh.engine.moves` et la validation finale de `GameState`.

Responsabilités:
- Offrir au plus une action par intersection
- Lister les intersections cliquables
- Fournir les instructions contextuelles pour l'UI
- Conserver l'état d'interaction (survol), jamais stocké dans GameState
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Set

from yinsh.app.game_service import GameService
from yinsh.engine.actions import Action, MoveRing, PlaceMarker, PlaceRing, RemoveRun
from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.moves import available_moves, is_empty, moveable_ring
from yinsh.engine.pieces import Marker, Occupant, Player, Ring
from yinsh.engine.state import (
    GameState,
    MovingRing,
    PlacingMarker,
    PlacingRing,
    RemovingRing,
    RemovingRun,
)

PLAYER_NAMES: Dict[Player, str] = {
    Player.WHITE: "Blanc",
    Player.BLACK: "Noir",
}


class GlyphShape(Enum):
    """Variantes de cercle à dessiner pour une cellule."""

    DOT = "DOT"
    RING = "RING"
    MARKER = "MARKER"


@dataclass(frozen=True)
class Glyph:
    shape: GlyphShape
    player: Optional[Player] = None


def glyph_for(occupant: Occupant) -> Glyph:
    if isinstance(occupant, Ring):
        return Glyph(GlyphShape.RING, occupant.player)
    if isinstance(occupant, Marker):
        return Glyph(GlyphShape.MARKER, occupant.player)
    return Glyph(GlyphShape.DOT)


def action_for(state: GameState, coord: Coordinate) -> Optional[Action]:
    """Action proposée par un clic sur `coord` dans l'état courant.

    Args:
        state: État de la partie
        coord: Intersection cliquée

    Returns:
        L'action à envoyer, ou None si le clic ne fait rien
    """
    board = state.board
    occupant = board.get(coord)
    if occupant is None:
        return None

    phase = state.phase
    if isinstance(phase, PlacingRing):
        return PlaceRing(coord) if is_empty(occupant) else None

    if isinstance(phase, PlacingMarker):
        if moveable_ring(board, (coord, occupant), phase.player):
            return PlaceMarker(coord)
        return None

    if isinstance(phase, MovingRing):
        if coord in available_moves(phase.origin, board):
            return MoveRing(phase.origin, coord)
        return None

    if isinstance(phase, RemovingRun):
        run = next((run for run in phase.runs if coord in run), None)
        if run is None:
            return None
        return RemoveRun(run, phase.player)

    return None


def clickable_positions(state: GameState) -> Set[Coordinate]:
    """Intersections pour lesquelles un clic produit une action."""

    return {
        coord
        for coord in state.board.coordinates()
        if action_for(state, coord) is not None
    }


def instructions(state: GameState) -> str:
    """Texte d'instruction pour le joueur courant."""

    phase = state.phase
    name = PLAYER_NAMES[phase.player]

    if isinstance(phase, PlacingRing):
        return f"{name}: placez un anneau ({phase.remaining} restants ensuite)"
    if isinstance(phase, PlacingMarker):
        if not clickable_positions(state):
            return f"{name}: aucun anneau ne peut bouger"
        return f"{name}: posez un pion dans un de vos anneaux"
    if isinstance(phase, MovingRing):
        return f"{name}: déplacez l'anneau"
    if isinstance(phase, RemovingRun):
        return f"{name}: choisissez une ligne de cinq à retirer"
    if isinstance(phase, RemovingRing):
        return f"{name}: retirez un anneau"
    return ""


class BoardController:
    """Contrôleur des clics plateau.

    Fait le lien entre les clics utilisateur et le GameService, et porte
    l'état de survol utilisé pour prévisualiser les déplacements.
    """

    def __init__(self, game_service: GameService) -> None:
        self.game_service = game_service
        self.state: GameState = game_service.state
        self.hovered: Optional[Coordinate] = None

        # Cache des positions cliquables pour éviter de recalculer à chaque frame
        self._clickable_cache: Optional[Set[Coordinate]] = None

    def refresh_state(self) -> None:
        """Resynchronise avec le service (à appeler après chaque action)."""
        self.state = self.game_service.state
        self._clickable_cache = None

    def get_clickable_positions(self) -> Set[Coordinate]:
        if self._clickable_cache is None:
            self._clickable_cache = clickable_positions(self.state)
        return self._clickable_cache

    def handle_click(self, coord: Coordinate) -> bool:
        """Handle user click on an intersection.

        Returns:
            True if an action was dispatched and changed the game
        """
        action = action_for(self.state, coord)
        if action is None:
            return False

        previous = self.state
        self.game_service.dispatch(action)
        self.refresh_state()
        return self.state is not previous

    def handle_hover(self, coord: Optional[Coordinate]) -> None:
        self.hovered = coord

    def get_preview_destinations(self) -> Set[Coordinate]:
        """Destinations à prévisualiser.

        Pendant le glissement: celles de l'anneau en cours. Pendant la pose
        d'un pion: celles de l'anneau survolé, s'il est proposé.
        """
        phase = self.state.phase
        if isinstance(phase, MovingRing):
            return available_moves(phase.origin, self.state.board)
        if isinstance(phase, PlacingMarker) and self.hovered is not None:
            if self.hovered in self.get_clickable_positions():
                return available_moves(self.hovered, self.state.board)
        return set()

    def get_hovered_run(self) -> Set[Coordinate]:
        """Ligne qui serait retirée par un clic sur la cellule survolée."""
        if self.hovered is None:
            return set()
        action = action_for(self.state, self.hovered)
        if isinstance(action, RemoveRun):
            return set(action.cells)
        return set()

    def get_instructions(self) -> str:
        return instructions(self.state)


__all__ = [
    "PLAYER_NAMES",
    "GlyphShape",
    "Glyph",
    "glyph_for",
    "action_for",
    "clickable_positions",
    "instructions",
    "BoardController",
]
