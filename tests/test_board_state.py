"""Tests for BoardState."""

import numpy as np
import pytest

from connectn.exceptions import IllegalMoveError, InvalidConfigurationError
from connectn.games.connectn import (
    EMPTY,
    PLAYER_1,
    PLAYER_2,
    BoardState,
    GameConfig,
    decode_state,
)

# Fills a 4x4 board in alternating turns without ever making a line of four.
DRAW_MOVES_4X4 = [1, 0, 1, 0, 3, 2, 3, 2, 0, 1, 0, 1, 2, 3, 2, 3]


def play(board: BoardState, moves):
    for col in moves:
        board.apply_move(col)
        board.switch_active_player()


def test_board_initialization():
    """Test default configuration."""
    board = BoardState()
    assert (board.rows, board.cols, board.win_con) == (6, 7, 4)
    assert board.active_player == PLAYER_1
    assert not board.surrendered
    assert np.all(board.grid == EMPTY)
    assert not board.is_game_over()


def test_invalid_initial_config_rejected():
    """Test that an invalid explicit config raises before allocating a grid."""
    with pytest.raises(InvalidConfigurationError):
        BoardState(GameConfig(rows=3, cols=7, win_con=4))


@pytest.mark.parametrize("rows,cols,win_con", [(2, 2, 2), (4, 9, 4), (6, 7, 4), (10, 5, 5)])
def test_configure_allocates_empty_grid(rows, cols, win_con):
    """Test that a valid configuration yields a fresh, non-full grid."""
    board = BoardState()
    assert board.configure(rows, cols, win_con)
    assert board.grid.shape == (rows, cols)
    assert board.win_con == win_con
    assert not board.is_board_full()


@pytest.mark.parametrize("rows,cols,win_con", [(6, 7, 1), (6, 7, 0), (3, 7, 4), (6, 3, 4), (5, 5, 6)])
def test_configure_rejects_invalid_settings(rows, cols, win_con):
    """Test that a rejected configuration keeps the previous one active."""
    board = BoardState()
    board.configure(5, 5, 3)
    board.apply_move(2)

    assert not board.configure(rows, cols, win_con)
    assert board.config == GameConfig(5, 5, 3)
    assert board.grid[4, 2] == PLAYER_1


@pytest.mark.parametrize("column", [-1, -100, 7, 8, 1000])
def test_out_of_range_moves_are_illegal(column):
    """Test that out-of-range columns are illegal, not errors."""
    board = BoardState()
    assert not board.is_move_legal(column)


def test_full_column_is_illegal():
    """Test legality once a column fills up."""
    board = BoardState()
    assert board.is_move_legal(0) is True
    play(board, [0] * 6)
    assert board.is_move_legal(0) is False
    assert 0 not in board.legal_moves()
    assert board.legal_moves() == [1, 2, 3, 4, 5, 6]


def test_apply_move_is_gravity_correct():
    """Test that a piece lands on the lowest empty row and nothing else changes."""
    board = BoardState()
    play(board, [3, 3, 4])

    before = board.snapshot()
    row = board.apply_move(3)
    after = board.snapshot()

    assert row == 3
    changed = np.argwhere(before != after)
    assert changed.tolist() == [[3, 3]]
    assert after[3, 3] == PLAYER_2


def test_apply_move_does_not_switch_player():
    """Test that the active player only changes on an explicit switch."""
    board = BoardState()
    board.apply_move(0)
    assert board.active_player == PLAYER_1
    board.switch_active_player()
    assert board.active_player == PLAYER_2
    board.switch_active_player()
    assert board.active_player == PLAYER_1


def test_illegal_apply_has_no_side_effect():
    """Test that applying an illegal move raises and leaves the board intact."""
    board = BoardState(GameConfig(2, 2, 2))
    play(board, [0, 0])
    before = board.to_state()

    with pytest.raises(IllegalMoveError):
        board.apply_move(0)
    with pytest.raises(IllegalMoveError):
        board.apply_move(5)
    assert board.to_state() == before


def test_grid_view_is_read_only():
    """Test that the exposed grid cannot be written through."""
    board = BoardState()
    with pytest.raises(ValueError):
        board.grid[5, 0] = PLAYER_1
    snapshot = board.snapshot()
    snapshot[5, 0] = PLAYER_1
    assert board.grid[5, 0] == EMPTY


def test_win_reported_for_mover_before_switch():
    """Test that the win check runs for the active player."""
    board = BoardState()
    play(board, [0, 1, 0, 1, 0, 1])
    board.apply_move(0)

    assert board.is_win_condition_met()
    assert board.is_game_over()
    assert board.winner() == PLAYER_1

    board.switch_active_player()
    assert not board.is_win_condition_met()


def test_full_board_without_winner():
    """Test a 4x4 board filled with no line of four."""
    board = BoardState(GameConfig(4, 4, 4))
    for col in DRAW_MOVES_4X4:
        board.apply_move(col)
        assert not board.is_win_condition_met()
        board.switch_active_player()

    assert board.is_board_full()
    assert not board.is_win_condition_met()
    assert board.winner() is None
    assert board.is_game_over()


def test_full_board_from_decoded_state():
    """Test the same draw position loaded from its encoded form."""
    board = BoardState.from_state(decode_state("1212121221212121-4-4-4-1"))
    assert board.is_board_full()
    assert not board.is_win_condition_met()
    assert board.is_game_over()


def test_surrender_ends_game_without_touching_grid():
    """Test surrender mid-game."""
    board = BoardState()
    play(board, [3, 4, 3])
    grid_before = board.snapshot()
    full_before = board.is_board_full()
    win_before = board.is_win_condition_met()

    board.surrender()

    assert board.is_game_over()
    assert board.surrendered
    assert np.array_equal(board.grid, grid_before)
    assert board.is_board_full() == full_before
    assert board.is_win_condition_met() == win_before


def test_reset_restores_defaults():
    """Test reset after a configured, surrendered game."""
    board = BoardState()
    board.configure(8, 8, 5)
    play(board, [1, 2, 3])
    board.surrender()

    board.reset()

    assert board.config == GameConfig()
    assert np.all(board.grid == EMPTY)
    assert not board.surrendered
    assert board.active_player == PLAYER_1


def test_load_state_rejects_mismatched_grid():
    """Test that load_state validates before replacing anything."""
    board = BoardState()
    state = board.to_state()
    state.grid = np.zeros((2, 2), dtype=np.int8)

    with pytest.raises(InvalidConfigurationError):
        board.load_state(state)
    assert board.grid.shape == (6, 7)
