"""Spin outcome contract shared by the resolver, the store and the interfaces."""
from __future__ import annotations

from dataclasses import dataclass

from lucky_money.core.enums import Scenario
from lucky_money.core.types import Amount


@dataclass(frozen=True, slots=True)
class InventoryDelta:
    """Stock change to apply for a resolved spin."""

    value: Amount
    change: int = -1


@dataclass(frozen=True, slots=True)
class SpinOutcome:
    """What a spin showed, what it paid, and how it got there."""

    displayed: Amount
    real: Amount
    scenario: Scenario
    inventory_delta: InventoryDelta | None = None

    @property
    def is_empty(self) -> bool:
        return self.scenario is Scenario.EMPTY

    @property
    def is_troll(self) -> bool:
        return self.scenario is Scenario.TROLL_FAKE_TO_REAL


EMPTY_OUTCOME = SpinOutcome(displayed=Amount(0), real=Amount(0), scenario=Scenario.EMPTY)


__all__ = ["EMPTY_OUTCOME", "InventoryDelta", "SpinOutcome"]
