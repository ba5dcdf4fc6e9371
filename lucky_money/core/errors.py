"""Error hierarchy shared by the spin engine subsystems.

Public operations of the game state store never let these escape; they are
raised by the lower layers (inventory, persistence, config) so that the store
and the entry point can decide how to degrade.
"""
from __future__ import annotations


class CoreError(Exception):
    """Base class for all custom exceptions in the application."""


class ConfigurationError(CoreError):
    """Raised when configuration files are missing or invalid."""


class UnknownDenominationError(CoreError):
    """Raised when a value is not part of the denomination catalog."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Unknown denomination: {value}")
        self.value = value


class GameStateError(CoreError):
    """Raised when the persisted game state cannot be read or written."""
