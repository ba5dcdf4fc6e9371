"""One-shot rigging instructions for the next spin.

The slot holds exactly one of three variants. Each variant carries only the
parameters it needs, so a troll instruction without a fake value cannot be
built. The persisted form keeps the flat ``next_spin_mode``/``target_value``/
``fake_value`` layout used by the admin panel.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Union

from lucky_money.core.enums import RiggingMode
from lucky_money.core.types import Amount


@dataclass(frozen=True, slots=True)
class RandomRigging:
    """Honest weighted-random play."""

    @property
    def mode(self) -> RiggingMode:
        return RiggingMode.RANDOM


@dataclass(frozen=True, slots=True)
class ForceValue:
    """Pay out ``target`` if it is in stock."""

    target: Amount

    def __post_init__(self) -> None:
        if self.target <= 0:
            raise ValueError("ForceValue target must be positive")

    @property
    def mode(self) -> RiggingMode:
        return RiggingMode.FORCE_VALUE


@dataclass(frozen=True, slots=True)
class TrollFakeThenReal:
    """Show ``displayed`` first, then pay out ``real``.

    ``displayed`` is cosmetic: it need not be in the catalog nor in stock.
    """

    displayed: Amount
    real: Amount

    def __post_init__(self) -> None:
        if self.displayed <= 0 or self.real <= 0:
            raise ValueError("Troll values must be positive")

    @property
    def mode(self) -> RiggingMode:
        return RiggingMode.TROLL_FAKE_HIGH_TO_LOW


RiggingConfig = Union[RandomRigging, ForceValue, TrollFakeThenReal]

RANDOM = RandomRigging()


def rigging_to_dict(rigging: RiggingConfig) -> Dict[str, Any]:
    target: int | None = None
    fake: int | None = None
    if isinstance(rigging, ForceValue):
        target = int(rigging.target)
    elif isinstance(rigging, TrollFakeThenReal):
        target = int(rigging.real)
        fake = int(rigging.displayed)
    return {"next_spin_mode": rigging.mode.value, "target_value": target, "fake_value": fake}


def _positive_or_none(raw: Any) -> Amount | None:
    if raw is None:
        return None
    value = int(raw)
    return Amount(value) if value > 0 else None


def rigging_from_dict(payload: Mapping[str, Any]) -> RiggingConfig:
    """Rebuild a rigging variant from its persisted form.

    A missing or non-positive target or fake value leaves nothing to rig, so
    it comes back as honest play. Raises ``TypeError`` for a non-object
    payload and ``ValueError`` for an unknown mode or a non-numeric value.
    """

    if not isinstance(payload, Mapping):
        raise TypeError("rigging payload must be an object")
    mode = RiggingMode(payload.get("next_spin_mode", RiggingMode.RANDOM.value))
    if mode is RiggingMode.RANDOM:
        return RANDOM
    target = _positive_or_none(payload.get("target_value"))
    if target is None:
        return RANDOM
    if mode is RiggingMode.FORCE_VALUE:
        return ForceValue(target=target)
    fake = _positive_or_none(payload.get("fake_value"))
    if fake is None:
        return RANDOM
    return TrollFakeThenReal(displayed=fake, real=target)


def describe_rigging(rigging: RiggingConfig) -> str:
    """Short human label used in admin status output and logs."""

    if isinstance(rigging, ForceValue):
        return f"forced {rigging.target}"
    if isinstance(rigging, TrollFakeThenReal):
        return f"troll {rigging.displayed} -> {rigging.real}"
    return "honest random"


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
