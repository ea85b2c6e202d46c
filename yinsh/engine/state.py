"""État du jeu et logique de transition.

Ce module définit l'état immuable d'une partie (plateau + phase) et la
machine à états qui applique les actions des joueurs.

Contrat: `GameState.apply_action` est totale. Une action qui ne correspond
pas à la phase courante (ou qui vise une cellule illégale) ne lève jamais
d'exception: l'état est retourné inchangé.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from yinsh.engine.actions import Action, MoveRing, PlaceMarker, PlaceRing, RemoveRun
from yinsh.engine.board import Board
from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.moves import available_moves, is_empty, moveable_ring
from yinsh.engine.pieces import EMPTY, Marker, Player, Ring
from yinsh.engine.rules import BOARD_RADIUS, FIRST_PLAYER, INITIAL_RINGS_REMAINING
from yinsh.engine.runs import Run, runs_of_five


@dataclass(frozen=True)
class PlacingRing:
    """Mise en place: `remaining` anneaux restent à poser après celui-ci."""

    remaining: int
    player: Player


@dataclass(frozen=True)
class PlacingMarker:
    """`player` doit poser un pion dans un de ses anneaux déplaçables."""

    player: Player


@dataclass(frozen=True)
class MovingRing:
    """Un pion vient d'être posé en `origin`; l'anneau doit glisser."""

    origin: Coordinate
    player: Player


@dataclass(frozen=True)
class RemovingRing:
    """Retrait d'un anneau après une ligne (aucune action ne l'atteint)."""

    player: Player


@dataclass(frozen=True)
class RemovingRun:
    """Une ou plusieurs lignes de cinq attendent d'être retirées."""

    runs: Tuple[Run, ...]
    player: Player


Phase = Union[PlacingRing, PlacingMarker, MovingRing, RemovingRing, RemovingRun]


@dataclass(frozen=True)
class GameState:
    """État immuable du jeu.

    Toutes les transitions retournent un nouvel état; plateau et phase sont
    toujours remplacés ensemble.
    """

    board: Board
    phase: Phase = field(
        default_factory=lambda: PlacingRing(INITIAL_RINGS_REMAINING, FIRST_PLAYER)
    )

    @classmethod
    def new_game(
        cls,
        *,
        radius: float = BOARD_RADIUS,
        rings_remaining: int = INITIAL_RINGS_REMAINING,
        first_player: Player = FIRST_PLAYER,
    ) -> "GameState":
        """Crée une partie: plateau vide, phase `PlacingRing`.

        Args:
            radius: Rayon du plateau (unités d'affichage)
            rings_remaining: Valeur initiale du décompte des anneaux
            first_player: Joueur qui pose le premier anneau

        Returns:
            État initial
        """
        if rings_remaining < 0:
            raise ValueError(f"Nombre d'anneaux invalide: {rings_remaining}")
        return cls(
            board=Board.empty(radius),
            phase=PlacingRing(rings_remaining, first_player),
        )

    @property
    def current_player(self) -> Player:
        return self.phase.player

    # ------------------------------------------------------------------
    # Légalité
    # ------------------------------------------------------------------

    def is_action_legal(self, action: Action) -> bool:
        """Vérifie si une action est acceptée dans la phase courante.

        Args:
            action: Action à vérifier

        Returns:
            True si l'action est légale
        """
        phase = self.phase

        if isinstance(action, PlaceRing):
            if not isinstance(phase, PlacingRing):
                return False
            return is_empty(self.board.get(action.at))

        if isinstance(action, PlaceMarker):
            if not isinstance(phase, PlacingMarker):
                return False
            position = (action.at, self.board.get(action.at))
            return moveable_ring(self.board, position, phase.player)

        if isinstance(action, MoveRing):
            if not isinstance(phase, MovingRing):
                return False
            if action.origin != phase.origin:
                return False
            return action.destination in available_moves(action.origin, self.board)

        if isinstance(action, RemoveRun):
            if not isinstance(phase, RemovingRun):
                return False
            if action.player != phase.player:
                return False
            return frozenset(action.cells) in phase.runs

        return False

    def legal_actions(self) -> List[Action]:
        """Retourne la liste des actions légales pour l'état courant."""
        phase = self.phase
        actions: List[Action] = []

        if isinstance(phase, PlacingRing):
            for coord, occupant in self.board.positions():
                if is_empty(occupant):
                    actions.append(PlaceRing(coord))

        elif isinstance(phase, PlacingMarker):
            for position in self.board.positions():
                if moveable_ring(self.board, position, phase.player):
                    actions.append(PlaceMarker(position[0]))

        elif isinstance(phase, MovingRing):
            for destination in sorted(available_moves(phase.origin, self.board)):
                actions.append(MoveRing(phase.origin, destination))

        elif isinstance(phase, RemovingRun):
            for run in phase.runs:
                actions.append(RemoveRun(run, phase.player))

        return actions

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def apply_action(self, action: Action) -> "GameState":
        """Applique une action et retourne le nouvel état.

        Une action illégale est ignorée: l'état courant est retourné tel quel.
        """
        if not self.is_action_legal(action):
            return self

        if isinstance(action, PlaceRing):
            return self._place_ring(action)
        if isinstance(action, PlaceMarker):
            return self._place_marker(action)
        if isinstance(action, MoveRing):
            return self._move_ring(action)
        if isinstance(action, RemoveRun):
            return self._remove_run(action)
        return self

    def _place_ring(self, action: PlaceRing) -> "GameState":
        phase = self.phase
        assert isinstance(phase, PlacingRing)
        board = self.board.set(action.at, Ring(phase.player))
        next_phase: Phase
        if phase.remaining == 0:
            next_phase = PlacingMarker(phase.player.next())
        else:
            next_phase = PlacingRing(phase.remaining - 1, phase.player.next())
        return GameState(board=board, phase=next_phase)

    def _place_marker(self, action: PlaceMarker) -> "GameState":
        phase = self.phase
        assert isinstance(phase, PlacingMarker)
        # Le pion recouvre la cellule; l'anneau est désigné par MovingRing.origin
        board = self.board.set(action.at, Marker(phase.player))
        return GameState(board=board, phase=MovingRing(action.at, phase.player))

    def _move_ring(self, action: MoveRing) -> "GameState":
        phase = self.phase
        assert isinstance(phase, MovingRing)
        board = flip_markers(self.board, action.origin, action.destination)
        board = board.set(action.destination, Ring(phase.player))

        runs = runs_of_five(board)
        next_phase: Phase
        if runs:
            next_phase = RemovingRun(tuple(runs), phase.player)
        else:
            next_phase = PlacingMarker(phase.player.next())
        return GameState(board=board, phase=next_phase)

    def _remove_run(self, action: RemoveRun) -> "GameState":
        phase = self.phase
        assert isinstance(phase, RemovingRun)
        board = self.board.update({coord: EMPTY for coord in action.cells})
        return GameState(board=board, phase=PlacingMarker(phase.player.next()))


def flip_markers(board: Board, origin: Coordinate, destination: Coordinate) -> Board:
    """Retourne les pions strictement entre `origin` et `destination`."""

    changes = {}
    for coord in board.line(origin, destination):
        occupant = board.get(coord)
        if isinstance(occupant, Marker):
            changes[coord] = occupant.flipped()
    if not changes:
        return board
    return board.update(changes)


__all__ = [
    "PlacingRing",
    "PlacingMarker",
    "MovingRing",
    "RemovingRing",
    "RemovingRun",
    "Phase",
    "GameState",
    "flip_markers",
]
