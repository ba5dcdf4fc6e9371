"""Rigging configuration package."""

from .models import (
    RANDOM,
    ForceValue,
    RandomRigging,
    RiggingConfig,
    TrollFakeThenReal,
    describe_rigging,
    rigging_from_dict,
    rigging_to_dict,
)

__all__ = [
    "RANDOM",
    "ForceValue",
    "RandomRigging",
    "RiggingConfig",
    "TrollFakeThenReal",
    "describe_rigging",
    "rigging_from_dict",
    "rigging_to_dict",
]
