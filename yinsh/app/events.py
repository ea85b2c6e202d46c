"""Évènements publiés par la couche application (`yinsh.app`)."""

from __future__ import annotations

from dataclasses import dataclass

from yinsh.engine.actions import Action
from yinsh.engine.state import GameState


@dataclass(frozen=True)
class GameStartedEvent:
    """Émis lorsqu'une nouvelle partie est initialisée."""

    state: GameState


@dataclass(frozen=True)
class ActionAppliedEvent:
    """Émis après qu'une action légale a été appliquée."""

    action: Action
    previous_state: GameState
    new_state: GameState


@dataclass(frozen=True)
class ActionIgnoredEvent:
    """Émis quand une action ne correspond pas à la phase courante."""

    action: Action
    state: GameState
