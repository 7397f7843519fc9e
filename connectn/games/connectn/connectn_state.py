from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .utils import GameConfig


@dataclass(eq=False)
class GameState:
    """Detached snapshot of a board: grid, config, turn and surrender flag."""

    grid: np.ndarray
    config: GameConfig
    active_player: int
    surrendered: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.config == other.config
            and self.active_player == other.active_player
            and self.surrendered == other.surrendered
            and np.array_equal(self.grid, other.grid)
        )
