"""Sliding-window heuristic for connect-N positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from connectn.games.connectn import EMPTY, iter_lines, other_player
from ..value_fn import GridValueFn


@dataclass(frozen=True)
class WindowWeights:
    """
    Per-window scores, keyed by how far a window is from completion.

    "One away" means ``win_con - 1`` pieces and one empty cell, "two away"
    means ``win_con - 2`` pieces and two empty cells.
    """

    complete: int = 100
    one_away: int = 50
    two_away: int = 10
    opponent_one_away: int = -90
    opponent_two_away: int = -40


DEFAULT_WEIGHTS = WindowWeights()


def _window_scores(
    own: np.ndarray,
    opp: np.ndarray,
    empty: np.ndarray,
    win_con: int,
    weights: WindowWeights,
) -> np.ndarray:
    own_conditions = [own == win_con, (own == win_con - 1) & (empty == 1)]
    own_values = [weights.complete, weights.one_away]
    opp_conditions = [(opp == win_con - 1) & (empty == 1)]
    opp_values = [weights.opponent_one_away]

    # Two-away windows must hold at least one piece; for connect-2 they would
    # otherwise match every empty window.
    if win_con > 2:
        own_conditions.append((own == win_con - 2) & (empty == 2))
        own_values.append(weights.two_away)
        opp_conditions.append((opp == win_con - 2) & (empty == 2))
        opp_values.append(weights.opponent_two_away)

    return np.select(own_conditions, own_values, 0) + np.select(opp_conditions, opp_values, 0)


def window_score(
    window: Sequence[int],
    ai_player: int,
    weights: WindowWeights = DEFAULT_WEIGHTS,
) -> int:
    """Score a single window of ``len(window)`` cells for ``ai_player``."""
    cells = np.asarray(window)
    own = np.count_nonzero(cells == ai_player)
    opp = np.count_nonzero(cells == other_player(ai_player))
    empty = np.count_nonzero(cells == EMPTY)
    scores = _window_scores(
        np.array([own]), np.array([opp]), np.array([empty]), cells.size, weights
    )
    return int(scores[0])


def score(
    grid: np.ndarray,
    rows: int,
    cols: int,
    win_con: int,
    ai_player: int,
    weights: WindowWeights = DEFAULT_WEIGHTS,
) -> int:
    """
    Sum of window scores over every window of length ``win_con``.

    Windows are taken along rows, columns and both diagonal directions.

    Args:
        grid: Board array of shape (rows, cols). Never mutated.
        rows: Number of rows.
        cols: Number of columns.
        win_con: Connect-length, also the window length.
        ai_player: Player the score is computed for.
        weights: Per-window score table.

    Returns:
        Integer score, higher is better for ``ai_player``.
    """
    grid = np.asarray(grid)
    if grid.shape != (rows, cols):
        raise ValueError(f"Grid shape {grid.shape} does not match {rows}x{cols}")
    opponent = other_player(ai_player)

    total = 0
    for line in iter_lines(grid, win_con):
        windows = sliding_window_view(line, win_con)
        own = np.count_nonzero(windows == ai_player, axis=1)
        opp = np.count_nonzero(windows == opponent, axis=1)
        empty = np.count_nonzero(windows == EMPTY, axis=1)
        total += int(_window_scores(own, opp, empty, win_con, weights).sum())
    return total


class WindowHeuristicValueFn(GridValueFn):
    """Sliding-window heuristic behind the :class:`GridValueFn` interface."""

    def __init__(self, weights: Optional[WindowWeights] = None):
        self.weights = DEFAULT_WEIGHTS if weights is None else weights

    def evaluate(self, grid: np.ndarray, win_con: int, player: int) -> int:
        rows, cols = np.shape(grid)
        return score(grid, rows, cols, win_con, player, self.weights)
