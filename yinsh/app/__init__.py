"""Services d'application pour orchestrer le moteur Yinsh."""

from .event_bus import EventBus
from .events import ActionAppliedEvent, ActionIgnoredEvent, GameStartedEvent
from .game_service import GameService

__all__ = [
    "EventBus",
    "GameService",
    "GameStartedEvent",
    "ActionAppliedEvent",
    "ActionIgnoredEvent",
]
