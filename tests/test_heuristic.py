"""Tests for the sliding-window heuristic."""

import numpy as np
import pytest

from connectn.games.connectn import PLAYER_1, PLAYER_2, BoardState, decode_state
from connectn.search import WindowHeuristicValueFn, WindowWeights
from connectn.search.connectn import DEFAULT_WEIGHTS, score, window_score


@pytest.mark.parametrize(
    "window,expected",
    [
        ([2, 2, 2, 2], 100),
        ([2, 2, 2, 0], 50),
        ([0, 2, 2, 2], 50),
        ([2, 0, 2, 0], 10),
        ([1, 1, 1, 0], -90),
        ([1, 0, 1, 1], -90),
        ([1, 1, 0, 0], -40),
        ([2, 1, 0, 0], 0),
        ([2, 2, 2, 1], 0),
        ([1, 1, 1, 1], 0),
        ([2, 0, 0, 0], 0),
        ([0, 0, 0, 0], 0),
    ],
)
def test_window_tiers_connect_four(window, expected):
    """Test each scoring tier for a window of four with player 2 as the AI."""
    assert window_score(window, PLAYER_2) == expected


@pytest.mark.parametrize(
    "window,expected",
    [
        ([1, 1, 1, 1, 0], 50),
        ([1, 1, 1, 0, 0], 10),
        ([2, 2, 2, 2, 0], -90),
        ([2, 0, 2, 0, 2], -40),
        ([1, 1, 0, 0, 0], 0),
    ],
)
def test_window_tiers_scale_with_connect_length(window, expected):
    """Test that near-win tiers are measured from the connect-length."""
    assert window_score(window, PLAYER_1) == expected


def test_connect_two_has_no_two_away_tier():
    """Test that empty windows score nothing for connect-2."""
    assert window_score([0, 0], PLAYER_1) == 0
    assert window_score([1, 0], PLAYER_1) == 50
    assert window_score([2, 0], PLAYER_1) == -90
    assert window_score([1, 1], PLAYER_1) == 100


def test_weight_ordering():
    """Test the relative order of the default weights."""
    w = DEFAULT_WEIGHTS
    assert w.complete > w.one_away > w.two_away > 0
    assert -w.opponent_one_away > w.two_away
    assert w.opponent_one_away < w.opponent_two_away < 0


def test_empty_board_scores_zero():
    board = BoardState()
    assert score(board.grid, 6, 7, 4, PLAYER_2) == 0


def test_single_piece_scores_zero():
    """Test that windows with one piece out of four are neutral."""
    board = BoardState()
    grid = board.snapshot()
    grid[5, 3] = PLAYER_2
    assert score(grid, 6, 7, 4, PLAYER_2) == 0
    assert score(grid, 6, 7, 4, PLAYER_1) == 0


def test_vertical_three_score():
    """Test the full-board sum for a vertical three with an open top."""
    grid = np.zeros((6, 7), dtype=np.int8)
    grid[3:6, 3] = PLAYER_2
    # rows 2-5 of column 3: one away (+50); rows 1-4: two away (+10)
    assert score(grid, 6, 7, 4, PLAYER_2) == 60
    # From the other side the same windows are threats.
    assert score(grid, 6, 7, 4, PLAYER_1) == -90 - 40


def test_score_does_not_mutate_grid():
    board = BoardState.from_state(decode_state("0000000022001110-4-4-4-2"))
    before = board.snapshot()
    score(board.grid, 4, 4, 4, PLAYER_2)
    assert np.array_equal(board.grid, before)


def test_symmetric_under_role_swap():
    """Test that swapping labels and the AI seat keeps the score."""
    rng = np.random.default_rng(7)
    for rows, cols, win_con in [(6, 7, 4), (5, 5, 3), (4, 9, 4), (3, 3, 2)]:
        for _ in range(20):
            grid = rng.integers(0, 3, size=(rows, cols)).astype(np.int8)
            swapped = grid.copy()
            swapped[grid == PLAYER_1] = PLAYER_2
            swapped[grid == PLAYER_2] = PLAYER_1
            assert score(grid, rows, cols, win_con, PLAYER_2) == score(
                swapped, rows, cols, win_con, PLAYER_1
            )


def test_value_fn_uses_custom_weights():
    grid = np.zeros((4, 4), dtype=np.int8)
    grid[3, 0:3] = PLAYER_1
    value_fn = WindowHeuristicValueFn(WindowWeights(opponent_one_away=-500))
    assert value_fn.evaluate(grid, 4, PLAYER_2) == -500
    assert WindowHeuristicValueFn().evaluate(grid, 4, PLAYER_2) == -90


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        score(np.zeros((6, 7), dtype=np.int8), 6, 6, 4, PLAYER_1)
