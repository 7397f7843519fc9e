"""Exceptions raised by the connect-N engine."""

from __future__ import annotations


class ConnectNError(ValueError):
    """Base class for recoverable engine errors."""


class InvalidConfigurationError(ConnectNError):
    """Board dimensions or connect-length violate ``rows, cols >= win_con > 1``."""


class IllegalMoveError(ConnectNError):
    """Column is out of range or already full."""


class CorruptStateError(ConnectNError):
    """Serialized game state could not be decoded."""
