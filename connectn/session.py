"""Turn sequencing for a human-vs-human or human-vs-agent game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .agents import BaseAgent
from .games.connectn import BoardState, other_player
from .utils.persistence import PathLike, load_game, save_game

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    CONFIGURING = "configuring"
    AWAITING_MOVE = "awaiting_move"
    MOVE_APPLIED = "move_applied"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Outcome:
    """How a finished game ended. ``winner`` is None for a draw."""

    winner: Optional[int]
    reason: str  # "win", "draw" or "surrender"


@dataclass
class TurnResult:
    """Moves applied by one call into the session, as (player, column) pairs."""

    accepted: bool
    moves: List[Tuple[int, int]] = field(default_factory=list)
    outcome: Optional[Outcome] = None


class GameSession:
    """
    Drives a :class:`BoardState` through the session phases.

    CONFIGURING -> AWAITING_MOVE on a valid configuration (or :meth:`start`
    with the current settings). Each legal move passes through
    MOVE_APPLIED and ends in GAME_OVER or, after switching the active
    player, back in AWAITING_MOVE. If an agent holds the next seat it moves
    immediately. GAME_OVER is left only through :meth:`new_game` or
    :meth:`load`.
    """

    def __init__(self, board: Optional[BoardState] = None, agent: Optional[BaseAgent] = None):
        self.board = BoardState() if board is None else board
        self.agent = agent
        self._phase = SessionPhase.CONFIGURING
        self._outcome: Optional[Outcome] = None

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def outcome(self) -> Optional[Outcome]:
        return self._outcome

    # ------------------------------------------------------------------
    # Phase transitions
    # ------------------------------------------------------------------

    def configure(self, rows: int, cols: int, win_con: int) -> Optional[TurnResult]:
        """
        Apply new settings and start the game.

        Returns:
            None if the settings are rejected (the old ones stay active),
            otherwise the result of :meth:`start`.
        """
        self._require(SessionPhase.CONFIGURING)
        if not self.board.configure(rows, cols, win_con):
            return None
        return self.start()

    def start(self) -> TurnResult:
        """Start playing with the current settings."""
        self._require(SessionPhase.CONFIGURING)
        self._phase = SessionPhase.AWAITING_MOVE
        result = TurnResult(accepted=True)
        self._maybe_agent_move(result)
        return result

    def play(self, column: int) -> TurnResult:
        """
        Apply the active player's move, then the agent's reply if it holds
        the next seat.

        Illegal columns are reported with ``accepted=False`` and change
        nothing.
        """
        self._require(SessionPhase.AWAITING_MOVE)
        if not self.board.is_move_legal(column):
            logger.debug("Rejected move %s for player %d", column, self.board.active_player)
            return TurnResult(accepted=False)

        result = TurnResult(accepted=True)
        self._apply(column, result)
        self._maybe_agent_move(result)
        return result

    def surrender(self) -> Outcome:
        """The active player gives up; the opponent wins."""
        self._require(SessionPhase.AWAITING_MOVE)
        loser = self.board.active_player
        self.board.surrender()
        self._finish(Outcome(winner=other_player(loser), reason="surrender"))
        return self._outcome

    def new_game(self) -> None:
        """Reset to default settings and return to CONFIGURING."""
        self.board.reset()
        self._outcome = None
        self._phase = SessionPhase.CONFIGURING

    def save(self, path: PathLike) -> None:
        save_game(self.board, path)

    def load(self, path: PathLike) -> TurnResult:
        """
        Restore a saved game and continue from it.

        If the agent holds the seat to move in the saved position it replies
        straight away.

        Returns:
            The agent's reply, if any, and the outcome when the saved game
            is already over.

        Raises:
            FileNotFoundError: If there is no save at ``path``.
            CorruptStateError: If the save cannot be decoded; the session
                is left unchanged.
        """
        load_game(self.board, path)
        self._outcome = None
        self._phase = SessionPhase.AWAITING_MOVE

        winner = self.board.winner()
        if winner is not None:
            self._finish(Outcome(winner=winner, reason="win"))
        elif self.board.is_board_full():
            self._finish(Outcome(winner=None, reason="draw"))

        result = TurnResult(accepted=True, outcome=self._outcome)
        self._maybe_agent_move(result)
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, phase: SessionPhase) -> None:
        if self._phase is not phase:
            raise ValueError(f"Session is {self._phase.value}, expected {phase.value}")

    def _apply(self, column: int, result: TurnResult) -> None:
        player = self.board.active_player
        self.board.apply_move(column)
        self._phase = SessionPhase.MOVE_APPLIED
        result.moves.append((player, column))

        # Termination is checked for the mover before the turn passes on.
        if self.board.is_win_condition_met():
            self._finish(Outcome(winner=player, reason="win"))
        elif self.board.is_game_over():
            self._finish(Outcome(winner=None, reason="draw"))
        else:
            self.board.switch_active_player()
            self._phase = SessionPhase.AWAITING_MOVE
        result.outcome = self._outcome

    def _maybe_agent_move(self, result: TurnResult) -> None:
        agent = self.agent
        if (
            agent is not None
            and self._phase is SessionPhase.AWAITING_MOVE
            and self.board.active_player == agent.player
        ):
            column = agent.act(self.board)
            logger.debug("Agent (player %d) chose column %d", agent.player, column)
            self._apply(column, result)

    def _finish(self, outcome: Outcome) -> None:
        self._outcome = outcome
        self._phase = SessionPhase.GAME_OVER
        logger.debug("Game over: %s", outcome)
