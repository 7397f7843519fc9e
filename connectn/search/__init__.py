from __future__ import annotations

from .connectn import WindowHeuristicValueFn, WindowWeights
from .move_selector import best_move, rank_moves
from .value_fn import GridValueFn

__all__ = [
    "GridValueFn",
    "WindowHeuristicValueFn",
    "WindowWeights",
    "best_move",
    "rank_moves",
]
