"""Règles et constantes de la variante.

Ce module expose les seuls paramètres réglables du jeu:
- rayon du plateau (`BOARD_RADIUS`)
- nombre d'anneaux restant à poser au départ (`INITIAL_RINGS_REMAINING`)
- longueur d'une ligne gagnante (`RUN_LENGTH`)
"""

from yinsh.engine.pieces import Player

# Rayon en unités d'affichage: 4.6 donne les 85 intersections classiques
BOARD_RADIUS: float = 4.6

# Décompté jusqu'à 0 inclus: 10 anneaux posés, 5 par joueur
INITIAL_RINGS_REMAINING: int = 9

RUN_LENGTH: int = 5

FIRST_PLAYER: Player = Player.WHITE

__all__ = [
    "BOARD_RADIUS",
    "INITIAL_RINGS_REMAINING",
    "RUN_LENGTH",
    "FIRST_PLAYER",
]
