"""Enumerations shared across the spin engine subsystems.

Values double as the persisted string form, so renaming a member requires a
compatible ``value``.
"""
from __future__ import annotations

from enum import Enum


class RiggingMode(str, Enum):
    """How the next spin must resolve."""

    RANDOM = "random"
    FORCE_VALUE = "force_value"
    TROLL_FAKE_HIGH_TO_LOW = "troll_fake_high_to_low"


class Scenario(str, Enum):
    """Resolution path recorded with every spin."""

    RANDOM = "random"
    FORCED = "forced"
    TROLL_FAKE_TO_REAL = "troll_fake_to_real"
    EMPTY = "empty"
