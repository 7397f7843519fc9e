"""Connect-N board engine with a sliding-window heuristic opponent."""

from .agents import HeuristicAgent
from .exceptions import (
    ConnectNError,
    CorruptStateError,
    IllegalMoveError,
    InvalidConfigurationError,
)
from .games.connectn import BoardState, GameConfig, GameState, decode_state, encode_state
from .search import best_move
from .session import GameSession, Outcome, SessionPhase, TurnResult

__version__ = "0.1.0"

__all__ = [
    "BoardState",
    "ConnectNError",
    "CorruptStateError",
    "GameConfig",
    "GameSession",
    "GameState",
    "HeuristicAgent",
    "IllegalMoveError",
    "InvalidConfigurationError",
    "Outcome",
    "SessionPhase",
    "TurnResult",
    "best_move",
    "decode_state",
    "encode_state",
]
