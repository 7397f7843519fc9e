"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from connectn.games.connectn import BoardState


class BaseAgent(ABC):
    """Base class for automated players."""

    player: int

    @abstractmethod
    def act(self, state: BoardState) -> int:
        """Return a legal column for ``state``. Must not mutate the board."""
