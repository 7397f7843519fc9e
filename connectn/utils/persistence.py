"""Save and load a game to a one-line text file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from connectn.exceptions import CorruptStateError
from connectn.games.connectn import BoardState, decode_state, encode_state

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def save_exists(path: PathLike) -> bool:
    return Path(path).is_file()


def save_game(board: BoardState, path: PathLike) -> None:
    """
    Write the encoded board state to ``path``, replacing any previous save.

    Args:
        board: Board to save
        path: Path to save file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(encode_state(board) + "\n", encoding="ascii")
    logger.info("Game saved to %s", path)


def load_game(board: BoardState, path: PathLike) -> None:
    """
    Replace ``board`` with the state stored at ``path``.

    The last non-empty line of the file is decoded. The board is left
    untouched if decoding fails.

    Raises:
        FileNotFoundError: If there is no save at ``path``.
        CorruptStateError: If the stored state cannot be decoded.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="ascii")
    except UnicodeDecodeError as exc:
        raise CorruptStateError(f"Save file {path} is not a text save") from exc
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise CorruptStateError(f"Save file {path} is empty")
    board.load_state(decode_state(lines[-1]))
    logger.info("Game loaded from %s", path)
