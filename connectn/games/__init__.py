from __future__ import annotations

from .connectn import BoardState, GameConfig, GameState

__all__ = ["BoardState", "GameConfig", "GameState"]
