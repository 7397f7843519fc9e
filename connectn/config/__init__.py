"""Config package exports."""

from .schema import DEFAULT_SAVE_PATH, AppConfig, SessionConfig, load_config

__all__ = [
    "AppConfig",
    "DEFAULT_SAVE_PATH",
    "SessionConfig",
    "load_config",
]
