"""Single-ply best-move search."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from connectn.games.connectn import PLAYER_2, BoardState, drop_row
from .connectn import WindowHeuristicValueFn
from .value_fn import GridValueFn

logger = logging.getLogger(__name__)


def rank_moves(
    state: BoardState,
    ai_player: int = PLAYER_2,
    value_fn: Optional[GridValueFn] = None,
) -> List[Tuple[int, int]]:
    """
    Score every legal column for ``ai_player``.

    Each candidate is played on a fresh snapshot of the grid; the live board
    is never touched.

    Returns:
        ``(column, score)`` pairs in ascending column order.
    """
    if value_fn is None:
        value_fn = WindowHeuristicValueFn()

    ranked: List[Tuple[int, int]] = []
    for col in range(state.cols):
        if not state.is_move_legal(col):
            continue
        grid = state.snapshot()
        row = drop_row(grid, col)
        assert row is not None
        grid[row, col] = ai_player
        ranked.append((col, value_fn.evaluate(grid, state.win_con, ai_player)))
    return ranked


def best_move(
    state: BoardState,
    ai_player: int = PLAYER_2,
    value_fn: Optional[GridValueFn] = None,
) -> int:
    """
    Column with the highest heuristic score after one drop.

    Ties go to the leftmost column.

    Raises:
        ValueError: If the board has no legal column.
    """
    ranked = rank_moves(state, ai_player, value_fn)
    if not ranked:
        raise ValueError("No legal moves available")

    best_col, best_score = ranked[0]
    for col, value in ranked[1:]:
        if value > best_score:
            best_col, best_score = col, value

    logger.debug("Candidate scores for player %d: %s -> column %d", ai_player, ranked, best_col)
    return best_col
