"""Single-line text encoding of a game state.

Format::

    <rows*cols cell digits, row-major>-<rows>-<cols>-<win_con>-<active_player>

e.g. ``0010-2-2-2-2`` is a 2x2 connect-2 board with one Player 1 piece in
the bottom-left corner and Player 2 to move.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from connectn.exceptions import CorruptStateError
from .board_state import BoardState
from .connectn_state import GameState
from .utils import EMPTY, PLAYERS, GameConfig

SEPARATOR = "-"
_NUM_FIELDS = 5
_CELL_DIGITS = frozenset(str(v) for v in (EMPTY,) + PLAYERS)


def encode_state(state: Union[BoardState, GameState]) -> str:
    """Encode a board (or a detached snapshot) as one line of text."""
    if isinstance(state, BoardState):
        state = state.to_state()
    cells = "".join(str(int(v)) for v in state.grid.flatten())
    cfg = state.config
    return SEPARATOR.join(
        [cells, str(cfg.rows), str(cfg.cols), str(cfg.win_con), str(state.active_player)]
    )


def decode_state(text: str) -> GameState:
    """
    Decode a line produced by :func:`encode_state`.

    Raises:
        CorruptStateError: On a wrong field count, non-numeric fields, an
            invalid configuration, a cell count that differs from
            ``rows * cols``, unknown cell digits or an unknown player.
    """
    fields = text.strip().split(SEPARATOR)
    if len(fields) != _NUM_FIELDS:
        raise CorruptStateError(f"Expected {_NUM_FIELDS} fields, got {len(fields)}")

    cells, *numbers = fields
    if not all(n.isascii() and n.isdigit() for n in numbers):
        raise CorruptStateError(f"Non-numeric header fields: {numbers}")
    rows, cols, win_con, player = (int(n) for n in numbers)

    config = GameConfig(rows=rows, cols=cols, win_con=win_con)
    if not config.is_valid():
        raise CorruptStateError(f"Invalid configuration in saved state: {config}")
    if len(cells) != rows * cols:
        raise CorruptStateError(
            f"Expected {rows * cols} cells for a {rows}x{cols} board, got {len(cells)}"
        )
    if not set(cells) <= _CELL_DIGITS:
        raise CorruptStateError(f"Unknown cell values in {cells!r}")
    if player not in PLAYERS:
        raise CorruptStateError(f"Unknown active player: {player}")

    grid = np.fromiter((int(ch) for ch in cells), dtype=np.int8, count=len(cells))
    return GameState(grid=grid.reshape(rows, cols), config=config, active_player=player)
