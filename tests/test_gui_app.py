"""Tests d'intégration légère pour yinsh.gui.app.

Ces tests valident le modèle d'orchestration de la GUI (sans boucle
pygame): surbrillances, clics en pixels et en coordonnées, survol.
Le rendu est seulement exécuté, sans validation pixel-perfect.
"""

from __future__ import annotations

import os

import pytest

# Forcer le mode headless pour pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from yinsh.app.game_service import GameService
from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.pieces import Player, Ring
from yinsh.engine.state import MovingRing, PlacingMarker, PlacingRing
from yinsh.gui.app import YinshApp
from yinsh.gui.renderer import SCREEN_HEIGHT, SCREEN_WIDTH


@pytest.fixture
def pygame_screen():
    """Initialise pygame en mode headless et retourne une surface écran."""

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    try:
        yield screen
    finally:
        pygame.quit()


@pytest.fixture
def gui_app(pygame_screen):
    app = YinshApp(game_service=GameService(), screen=pygame_screen)
    app.start_new_game(rings_remaining=1)
    return app


def test_app_requires_started_game(pygame_screen):
    app = YinshApp(screen=pygame_screen)
    with pytest.raises(RuntimeError):
        app.get_ui_state()
    with pytest.raises(RuntimeError):
        _ = app.renderer


def test_app_starts_with_every_cell_highlighted(gui_app):
    ui_state = gui_app.get_ui_state()

    assert ui_state.phase == PlacingRing(1, Player.WHITE)
    assert ui_state.current_player is Player.WHITE
    assert len(ui_state.highlight_positions) == 85
    assert not ui_state.preview_destinations
    assert ui_state.instructions.startswith("Blanc")


def test_screen_click_places_ring(gui_app):
    x, y = gui_app.geometry.position(Coordinate(0, 0))

    assert gui_app.handle_screen_click(x + 3, y - 2)
    assert gui_app.state.board.get(Coordinate(0, 0)) == Ring(Player.WHITE)
    assert not gui_app.handle_screen_click(1, 1)


def test_full_turn_through_ui(gui_app):
    assert gui_app.handle_board_click(Coordinate(0, 0))
    assert gui_app.handle_board_click(Coordinate(-2, 2))
    assert gui_app.state.phase == PlacingMarker(Player.WHITE)
    assert gui_app.get_ui_state().highlight_positions == {Coordinate(0, 0)}

    x, y = gui_app.geometry.position(Coordinate(0, 0))
    gui_app.handle_mouse_motion(x, y)
    ui_state = gui_app.get_ui_state()
    assert ui_state.hovered == Coordinate(0, 0)
    assert Coordinate(2, 0) in ui_state.preview_destinations

    assert gui_app.handle_board_click(Coordinate(0, 0))
    assert gui_app.state.phase == MovingRing(Coordinate(0, 0), Player.WHITE)

    assert gui_app.handle_board_click(Coordinate(2, 0))
    assert gui_app.state.phase == PlacingMarker(Player.BLACK)


def test_render_does_not_crash(gui_app):
    gui_app.handle_board_click(Coordinate(0, 0))
    gui_app.handle_mouse_motion(0, 0)
    gui_app.render()
    assert gui_app.screen.get_width() == SCREEN_WIDTH
