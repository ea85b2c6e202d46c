"""GUI package: interface graphique deux joueurs avec pygame.

Modules:
- geometry: calculs de transformation logique -> écran
- controller: adaptateur de présentation (clics -> actions, glyphes)
- renderer: rendu du plateau, pièces et surbrillances
- app: orchestrateur principal, modèle testable sans boucle pygame
"""

__all__ = [
    "geometry",
    "controller",
    "renderer",
    "app",
]
