"""Exceptions raised by the memory match backend."""

from __future__ import annotations


class GameError(Exception):
    """Base class for all backend errors."""


class IllegalTransition(GameError):
    """Raised when the state machine is asked for a move its table forbids."""

    def __init__(self, source: str, target: str) -> None:
        super().__init__(f"Illegal phase transition: {source} -> {target}")
        self.source = source
        self.target = target


class ConfigError(GameError):
    """Raised for an unreadable config file or out-of-range settings."""
