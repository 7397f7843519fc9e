"""Shared constants and helpers for connect-N game logic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from connectn.exceptions import InvalidConfigurationError

# Cell values
EMPTY = 0
PLAYER_1 = 1
PLAYER_2 = 2
PLAYERS = (PLAYER_1, PLAYER_2)

# Default board dimensions
DEFAULT_ROWS = 6
DEFAULT_COLS = 7
DEFAULT_WIN_CON = 4


def other_player(player: int) -> int:
    """Return the opposing player identity."""
    if player not in PLAYERS:
        raise ValueError(f"Unknown player: {player}")
    return PLAYER_2 if player == PLAYER_1 else PLAYER_1


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions and the number of pieces to connect for a win."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    win_con: int = DEFAULT_WIN_CON

    def is_valid(self) -> bool:
        return self.win_con > 1 and self.rows >= self.win_con and self.cols >= self.win_con

    def validate(self) -> "GameConfig":
        if not self.is_valid():
            raise InvalidConfigurationError(
                f"Connect-length must be larger than 1 and both dimensions at least "
                f"the connect-length, got rows={self.rows} cols={self.cols} "
                f"win_con={self.win_con}"
            )
        return self


def empty_grid(rows: int, cols: int) -> np.ndarray:
    return np.zeros((rows, cols), dtype=np.int8)


def drop_row(grid: np.ndarray, col: int) -> Optional[int]:
    """
    Row index a piece dropped into ``col`` would land on.

    Args:
        grid: Board array, row 0 at the top.
        col: Column index (must be in range).

    Returns:
        Lowest empty row in the column, or None if the column is full.
    """
    for row in range(grid.shape[0] - 1, -1, -1):
        if grid[row, col] == EMPTY:
            return row
    return None
