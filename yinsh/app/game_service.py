"""Service d'orchestration pour une partie Yinsh."""

from __future__ import annotations

import logging
from typing import List

from yinsh.app.event_bus import EventBus
from yinsh.app.events import ActionAppliedEvent, ActionIgnoredEvent, GameStartedEvent
from yinsh.engine.actions import Action
from yinsh.engine.pieces import Player
from yinsh.engine.rules import BOARD_RADIUS, FIRST_PLAYER, INITIAL_RINGS_REMAINING
from yinsh.engine.state import GameState

logger = logging.getLogger(__name__)


class GameService:
    """Wrappe `GameState` et publie les évènements nécessaires à la GUI."""

    def __init__(self, *, event_bus: EventBus | None = None) -> None:
        self._event_bus = event_bus or EventBus()
        self._state: GameState | None = None

    @property
    def event_bus(self) -> EventBus:
        """Retourne le bus d'évènements utilisé par le service."""

        return self._event_bus

    @property
    def state(self) -> GameState:
        """État courant de la partie (erreur si aucune partie lancée)."""

        if self._state is None:
            raise RuntimeError("Aucune partie initialisée. Utiliser start_new_game().")
        return self._state

    def start_new_game(
        self,
        *,
        radius: float = BOARD_RADIUS,
        rings_remaining: int = INITIAL_RINGS_REMAINING,
        first_player: Player = FIRST_PLAYER,
    ) -> GameState:
        """Initialise une nouvelle partie et publie l'évènement associé."""

        state = GameState.new_game(
            radius=radius,
            rings_remaining=rings_remaining,
            first_player=first_player,
        )
        self._state = state
        logger.info(
            "Nouvelle partie: %d intersections, %s commence",
            len(state.board),
            first_player.value,
        )
        self._event_bus.publish(GameStartedEvent(state=state))
        return state

    def legal_actions(self) -> List[Action]:
        """Retourne les actions légales pour l'état courant."""

        return self.state.legal_actions()

    def dispatch(self, action: Action) -> GameState:
        """Applique une action, puis notifie les observateurs.

        Une action hors phase n'est pas une erreur: l'état reste inchangé et
        un `ActionIgnoredEvent` est publié.
        """

        current_state = self.state
        new_state = current_state.apply_action(action)

        if new_state is current_state:
            logger.debug("Action ignorée en phase %s: %s", current_state.phase, action)
            self._event_bus.publish(ActionIgnoredEvent(action=action, state=current_state))
            return current_state

        self._state = new_state
        logger.debug("Action appliquée: %s -> %s", action, new_state.phase)
        self._event_bus.publish(
            ActionAppliedEvent(
                action=action,
                previous_state=current_state,
                new_state=new_state,
            )
        )
        return new_state
