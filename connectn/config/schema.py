"""Configuration schema for game sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from connectn.games.connectn import PLAYER_2, PLAYERS, GameConfig

DEFAULT_SAVE_PATH = "gameState.txt"


@dataclass
class SessionConfig:
    vs_agent: bool = True
    agent_player: int = PLAYER_2
    save_path: str = DEFAULT_SAVE_PATH


@dataclass
class AppConfig:
    game: GameConfig = field(default_factory=GameConfig)
    session: SessionConfig = field(default_factory=SessionConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        game_data = data.get("game", {})
        game = GameConfig(
            rows=int(game_data.get("rows", GameConfig.rows)),
            cols=int(game_data.get("cols", GameConfig.cols)),
            win_con=int(game_data.get("win_con", GameConfig.win_con)),
        ).validate()

        session_data = data.get("session", {})
        session = SessionConfig(
            vs_agent=bool(session_data.get("vs_agent", True)),
            agent_player=int(session_data.get("agent_player", PLAYER_2)),
            save_path=str(session_data.get("save_path", DEFAULT_SAVE_PATH)),
        )
        if session.agent_player not in PLAYERS:
            raise ValueError(f"session.agent_player must be 1 or 2, got {session.agent_player}")

        return cls(game=game, session=session)


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
