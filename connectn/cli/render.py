"""Text rendering of a connect-N board."""

from __future__ import annotations

from connectn.games.connectn import PLAYER_1, PLAYER_2, BoardState

SYMBOLS = {PLAYER_1: "X", PLAYER_2: "O"}


def player_symbol(player: int) -> str:
    return SYMBOLS.get(player, " ")


def render_board(board: BoardState) -> str:
    """Board as text, columns numbered from 1 to match console input."""
    width = 4 * board.cols + 1
    lines = ["".join(f" {col + 1:^3}" for col in range(board.cols)), "=" * width]
    for row in board.grid:
        lines.append("|" + "|".join(f" {player_symbol(int(v))} " for v in row) + "|")
    lines.append("=" * width)
    return "\n".join(lines)
