"""Utility modules."""

from .persistence import load_game, save_exists, save_game

__all__ = ["load_game", "save_exists", "save_game"]
