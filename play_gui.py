#!/usr/bin/env python3
"""Lance la GUI Yinsh deux joueurs (même écran, basée sur pygame).

Ce script fournit une boucle d'évènements minimale permettant de jouer
manuellement en s'appuyant sur `yinsh.gui.app.YinshApp`.

Raccourcis clavier:
- N   : nouvelle partie
- ESC : quitter
"""

from __future__ import annotations

import logging
import sys

import pygame

from yinsh.app.events import ActionAppliedEvent
from yinsh.app.game_service import GameService
from yinsh.gui.app import YinshApp
from yinsh.gui.renderer import SCREEN_HEIGHT, SCREEN_WIDTH

logger = logging.getLogger("yinsh.play_gui")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Yinsh - deux joueurs")

    service = GameService()
    service.event_bus.subscribe(
        lambda event: logger.info("%s -> %s", event.action, event.new_state.phase)
        if isinstance(event, ActionAppliedEvent)
        else None
    )

    app = YinshApp(game_service=service, screen=screen)
    app.start_new_game()

    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_n:
                    app.start_new_game()
            elif event.type == pygame.MOUSEMOTION:
                app.handle_mouse_motion(*event.pos)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                app.handle_screen_click(*event.pos)

        app.render()
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
