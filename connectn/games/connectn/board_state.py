"""Mutable connect-N board owned by a single game session."""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from connectn.exceptions import IllegalMoveError, InvalidConfigurationError
from .connectn_state import GameState
from .utils import (
    EMPTY,
    PLAYER_1,
    PLAYERS,
    GameConfig,
    drop_row,
    empty_grid,
    other_player,
)
from .win_detector import has_line

logger = logging.getLogger(__name__)


class BoardState:
    """
    Connect-N board: grid, dimensions, connect-length, active player and
    surrender flag.

    The grid is only ever mutated through :meth:`apply_move`. Readers get a
    read-only view via :attr:`grid`; speculative evaluation must work on
    :meth:`snapshot` copies.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        config = GameConfig() if config is None else config.validate()
        self._config = config
        self._grid = empty_grid(config.rows, config.cols)
        self._player = PLAYER_1
        self._surrendered = False

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def configure(self, rows: int, cols: int, win_con: int) -> bool:
        """
        Switch to a new board size and connect-length.

        Returns:
            False and leaves the current configuration active when the
            settings are invalid; True after allocating a fresh empty grid.
        """
        config = GameConfig(rows=rows, cols=cols, win_con=win_con)
        if not config.is_valid():
            logger.warning(
                "Rejected configuration rows=%s cols=%s win_con=%s", rows, cols, win_con
            )
            return False
        self._config = config
        self._grid = empty_grid(rows, cols)
        logger.debug("Configured %dx%d board, connect %d", rows, cols, win_con)
        return True

    def reset(self) -> None:
        """Restore default settings, an empty grid and Player 1 to move."""
        self._config = GameConfig()
        self._grid = empty_grid(self._config.rows, self._config.cols)
        self._player = PLAYER_1
        self._surrendered = False

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def is_move_legal(self, column: int) -> bool:
        return 0 <= column < self.cols and bool(self._grid[0, column] == EMPTY)

    def legal_moves(self) -> List[int]:
        return [col for col in range(self.cols) if self._grid[0, col] == EMPTY]

    def apply_move(self, column: int) -> int:
        """
        Drop the active player's piece into ``column``.

        The active player is not switched so that win detection can run for
        the mover first.

        Returns:
            Row the piece landed on.

        Raises:
            IllegalMoveError: If the column is out of range or full.
        """
        if not self.is_move_legal(column):
            raise IllegalMoveError(f"Column {column} is not a legal move")
        row = drop_row(self._grid, column)
        assert row is not None
        self._grid[row, column] = self._player
        logger.debug("Player %d dropped into column %d (row %d)", self._player, column, row)
        return row

    def switch_active_player(self) -> None:
        self._player = other_player(self._player)

    def surrender(self) -> None:
        self._surrendered = True

    # ------------------------------------------------------------------
    # Termination
    # ------------------------------------------------------------------

    def is_board_full(self) -> bool:
        return bool(np.all(self._grid != EMPTY))

    def is_win_condition_met(self) -> bool:
        """Whether the active player holds a line of ``win_con`` pieces."""
        return has_line(self._grid, self.rows, self.cols, self.win_con, self._player)

    def is_game_over(self) -> bool:
        return self.is_board_full() or self._surrendered or self.is_win_condition_met()

    def winner(self) -> Optional[int]:
        """Player holding a winning line, or None."""
        for player in PLAYERS:
            if has_line(self._grid, self.rows, self.cols, self.win_con, player):
                return player
        return None

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def rows(self) -> int:
        return self._config.rows

    @property
    def cols(self) -> int:
        return self._config.cols

    @property
    def win_con(self) -> int:
        return self._config.win_con

    @property
    def active_player(self) -> int:
        return self._player

    @property
    def surrendered(self) -> bool:
        return self._surrendered

    @property
    def grid(self) -> np.ndarray:
        """Read-only view of the live grid."""
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def snapshot(self) -> np.ndarray:
        """Owned, writable copy of the grid for speculative evaluation."""
        return self._grid.copy()

    def to_state(self) -> GameState:
        return GameState(
            grid=self._grid.copy(),
            config=self._config,
            active_player=self._player,
            surrendered=self._surrendered,
        )

    def load_state(self, state: GameState) -> None:
        """
        Replace the whole board with ``state``.

        Raises:
            InvalidConfigurationError: If the config or grid shape is invalid.
            ValueError: If the grid holds unknown cell values or the active
                player is unknown.
        """
        config = state.config.validate()
        grid = np.asarray(state.grid, dtype=np.int8)
        if grid.shape != (config.rows, config.cols):
            raise InvalidConfigurationError(
                f"Grid shape {grid.shape} does not match {config.rows}x{config.cols}"
            )
        if not np.isin(grid, (EMPTY,) + PLAYERS).all():
            raise ValueError("Grid contains unknown cell values")
        if state.active_player not in PLAYERS:
            raise ValueError(f"Unknown player: {state.active_player}")

        self._config = config
        self._grid = grid.copy()
        self._player = state.active_player
        self._surrendered = state.surrendered

    @classmethod
    def from_state(cls, state: GameState) -> "BoardState":
        board = cls(state.config)
        board.load_state(state)
        return board

    def __repr__(self) -> str:
        return (
            f"BoardState(rows={self.rows}, cols={self.cols}, win_con={self.win_con}, "
            f"active_player={self._player}, surrendered={self._surrendered})"
        )
