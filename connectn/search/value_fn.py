"""Abstract grid value function for move selection."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class GridValueFn(ABC):
    """
    Scores a board grid from the point of view of ``player``.
    """

    @abstractmethod
    def evaluate(self, grid: np.ndarray, win_con: int, player: int) -> int:
        """
        Higher is better for ``player``.

        ``grid`` must be a copy the caller owns; implementations never see
        the live board.
        """
        ...
