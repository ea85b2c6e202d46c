"""Engine package exposing rules, board and state modules."""

from . import rules  # re-export for convenience

__all__ = ["rules"]
