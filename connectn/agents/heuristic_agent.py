"""Heuristic agent implementation."""

from typing import Optional

from connectn.games.connectn import PLAYER_2, PLAYERS, BoardState
from connectn.search import GridValueFn, best_move

from .base_agent import BaseAgent


class HeuristicAgent(BaseAgent):
    """
    Greedy one-ply agent: plays the column whose resulting grid scores
    highest under the sliding-window heuristic.
    """

    def __init__(self, player: int = PLAYER_2, value_fn: Optional[GridValueFn] = None):
        """
        Args:
            player: Seat the agent plays (1 or 2).
            value_fn: Grid scorer; defaults to the window heuristic.
        """
        if player not in PLAYERS:
            raise ValueError(f"Unknown player: {player}")
        self.player = player
        self.value_fn = value_fn

    def act(self, state: BoardState) -> int:
        return best_move(state, ai_player=self.player, value_fn=self.value_fn)
