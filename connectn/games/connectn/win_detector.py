"""Generalized N-in-a-row detection."""

from __future__ import annotations

from typing import Iterator

import numpy as np


def iter_lines(grid: np.ndarray, min_length: int) -> Iterator[np.ndarray]:
    """
    Yield every scan line of ``grid`` that can hold ``min_length`` cells.

    Four directional families are covered: rows (left to right), columns
    (top to bottom), descending diagonals (top-left to bottom-right) and
    ascending diagonals (bottom-left to top-right). Diagonals shorter than
    ``min_length`` are skipped.

    Args:
        grid: 2-D board array.
        min_length: Minimum line length to yield.

    Yields:
        1-D views into ``grid``.
    """
    rows, cols = grid.shape

    if cols >= min_length:
        for r in range(rows):
            yield grid[r, :]

    if rows >= min_length:
        for c in range(cols):
            yield grid[:, c]

    offsets = range(-(rows - min_length), cols - min_length + 1)
    # Flipping rows top-to-bottom turns ascending diagonals into descending ones.
    for source in (grid, grid[::-1, :]):
        for k in offsets:
            diagonal = np.diagonal(source, offset=k)
            if diagonal.size >= min_length:
                yield diagonal


def _has_run(line: np.ndarray, player: int, length: int) -> bool:
    counter = 0
    for cell in line:
        if cell == player:
            counter += 1
            if counter == length:
                return True
        else:
            counter = 0
    return False


def has_line(grid: np.ndarray, rows: int, cols: int, win_con: int, player: int) -> bool:
    """
    Check whether ``player`` has ``win_con`` pieces in an unbroken line.

    Args:
        grid: Board array of shape (rows, cols).
        rows: Number of rows.
        cols: Number of columns.
        win_con: Connect-length required to win.
        player: Player identity to look for.

    Returns:
        True as soon as one run reaches ``win_con``.
    """
    grid = np.asarray(grid)
    if grid.shape != (rows, cols):
        raise ValueError(f"Grid shape {grid.shape} does not match {rows}x{cols}")

    for line in iter_lines(grid, win_con):
        if _has_run(line, player, win_con):
            return True
    return False
