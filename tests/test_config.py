"""Tests for configuration schemas."""

from __future__ import annotations

from pathlib import Path

import pytest

from connectn.config import AppConfig, load_config
from connectn.exceptions import InvalidConfigurationError
from connectn.games.connectn import PLAYER_1, GameConfig


def test_app_config_parsing():
    data = {
        "game": {"rows": 8, "cols": 9, "win_con": 5},
        "session": {"vs_agent": False, "agent_player": 1, "save_path": "saves/game.txt"},
    }

    cfg = AppConfig.from_dict(data)
    assert cfg.game == GameConfig(8, 9, 5)
    assert cfg.session.vs_agent is False
    assert cfg.session.agent_player == PLAYER_1
    assert cfg.session.save_path == "saves/game.txt"


def test_app_config_defaults():
    cfg = AppConfig.from_dict({})
    assert cfg.game == GameConfig()
    assert cfg.session.vs_agent is True
    assert cfg.session.save_path == "gameState.txt"


def test_app_config_rejects_bad_game():
    with pytest.raises(InvalidConfigurationError):
        AppConfig.from_dict({"game": {"rows": 3, "cols": 7, "win_con": 4}})


def test_app_config_rejects_bad_seat():
    with pytest.raises(ValueError):
        AppConfig.from_dict({"session": {"agent_player": 3}})


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("game:\n  rows: 5\n  cols: 5\n  win_con: 3\n")
    cfg = load_config(path)
    assert cfg.game == GameConfig(5, 5, 3)


def test_load_config_requires_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_default_config_file():
    path = Path(__file__).parent.parent / "configs" / "default.yaml"
    cfg = load_config(path)
    assert cfg.game == GameConfig()
    assert cfg == AppConfig()
