from __future__ import annotations

from .heuristic_value_fn import (
    DEFAULT_WEIGHTS,
    WindowHeuristicValueFn,
    WindowWeights,
    score,
    window_score,
)

__all__ = [
    "DEFAULT_WEIGHTS",
    "WindowHeuristicValueFn",
    "WindowWeights",
    "score",
    "window_score",
]
