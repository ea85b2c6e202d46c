"""Tests smoke GUI: rendu headless pygame.

Objectif: valider que le renderer dessine plateau, pièces et
surbrillances sans crash (pas de validation pixel-perfect).
"""

import os

import pytest

# Force headless mode
os.environ["SDL_VIDEODRIVER"] = "dummy"

import pygame

from yinsh.engine.board import Board
from yinsh.engine.hexgrid import Coordinate
from yinsh.engine.pieces import Marker, Player, Ring
from yinsh.gui.geometry import BoardGeometry
from yinsh.gui.renderer import (
    BOARD_MARGIN,
    CELL_SIZE,
    COLOR_BG,
    COLOR_PREVIEW,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    BoardRenderer,
)


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    yield surface
    pygame.quit()


@pytest.fixture
def board():
    return (
        Board.empty(4.6)
        .set(Coordinate(0, 0), Ring(Player.WHITE))
        .set(Coordinate(1, 0), Marker(Player.BLACK))
        .set(Coordinate(2, 0), Ring(Player.BLACK))
        .set(Coordinate(-1, 0), Marker(Player.WHITE))
    )


def test_board_fits_on_screen(board):
    geometry = BoardGeometry(board, CELL_SIZE, BOARD_MARGIN)
    width, height = geometry.surface_size
    assert width <= SCREEN_WIDTH
    assert height <= SCREEN_HEIGHT


def test_render_board_and_pieces(screen, board):
    renderer = BoardRenderer(screen, BoardGeometry(board, CELL_SIZE, BOARD_MARGIN))
    renderer.render_board(board)
    renderer.render_pieces(board)
    renderer.render_highlights({Coordinate(3, 0)})
    renderer.render_highlights({Coordinate(-2, 0)}, COLOR_PREVIEW)
    renderer.render_instructions("Blanc: placez un anneau")

    # Le fond est peint dans un coin hors plateau
    assert tuple(screen.get_at((1, 1)))[:3] == COLOR_BG
