"""Connect-N board state, rules and state encoding."""

from __future__ import annotations

from .board_state import BoardState
from .codec import decode_state, encode_state
from .connectn_state import GameState
from .utils import (
    DEFAULT_COLS,
    DEFAULT_ROWS,
    DEFAULT_WIN_CON,
    EMPTY,
    PLAYER_1,
    PLAYER_2,
    PLAYERS,
    GameConfig,
    drop_row,
    other_player,
)
from .win_detector import has_line, iter_lines

__all__ = [
    "BoardState",
    "DEFAULT_COLS",
    "DEFAULT_ROWS",
    "DEFAULT_WIN_CON",
    "EMPTY",
    "GameConfig",
    "GameState",
    "PLAYER_1",
    "PLAYER_2",
    "PLAYERS",
    "decode_state",
    "drop_row",
    "encode_state",
    "has_line",
    "iter_lines",
    "other_player",
]
