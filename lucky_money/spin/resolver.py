"""Spin resolution: pick what a spin shows and what it really pays.

``resolve`` is a pure function of the inventory, the rigging slot and one
random draw. It never mutates its inputs; the game state store applies the
returned delta, records history and clears the rigging slot.
"""
from __future__ import annotations

import logging
from typing import Sequence

from lucky_money.core.enums import Scenario
from lucky_money.core.types import Amount, RandomSource
from lucky_money.inventory.models import Denomination, Inventory
from lucky_money.rigging.models import ForceValue, RandomRigging, RiggingConfig, TrollFakeThenReal
from lucky_money.spin.models import EMPTY_OUTCOME, InventoryDelta, SpinOutcome

LOGGER = logging.getLogger("lucky_money.spin")


def weighted_pick(available: Sequence[Denomination], rng: RandomSource) -> Amount:
    """Pick a value with probability proportional to its remaining stock.

    Walks ``available`` in catalog order subtracting weights from a draw in
    ``[0, total)``; the first denomination that brings the running value to
    ``<= 0`` wins. Zero-stock entries carry no weight and are skipped.
    """

    candidates = [d for d in available if d.quantity > 0]
    if not candidates:
        raise ValueError("weighted_pick requires at least one denomination in stock")
    total_weight = sum(d.quantity for d in candidates)
    point = rng.random() * total_weight
    for denom in candidates:
        point -= denom.quantity
        if point <= 0:
            return denom.value
    # Float drift can leave ``point`` a hair above zero.
    return candidates[0].value


def _find_available(available: Sequence[Denomination], value: int) -> Denomination | None:
    for denom in available:
        if denom.value == value:
            return denom
    return None


def resolve(
    inventory: Inventory,
    rigging: RiggingConfig,
    rng: RandomSource,
    user_name: str = "",
) -> SpinOutcome:
    """Resolve one spin against ``inventory`` under ``rigging``.

    An exhausted forced or troll target falls back to honest weighted play
    with scenario ``random``; the caller is not told about the downgrade.
    """

    available = inventory.available()
    if not available:
        LOGGER.info("Spin on empty inventory", extra={"user_name": user_name})
        return EMPTY_OUTCOME

    if isinstance(rigging, ForceValue) and _find_available(available, rigging.target) is not None:
        real = rigging.target
        displayed = real
        scenario = Scenario.FORCED
    elif isinstance(rigging, TrollFakeThenReal) and _find_available(available, rigging.real) is not None:
        real = rigging.real
        displayed = rigging.displayed
        scenario = Scenario.TROLL_FAKE_TO_REAL
    else:
        if not isinstance(rigging, RandomRigging):
            LOGGER.debug(
                "Rigged target out of stock, falling back to random",
                extra={"rigging_mode": rigging.mode.value},
            )
        real = weighted_pick(available, rng)
        displayed = real
        scenario = Scenario.RANDOM

    return SpinOutcome(
        displayed=Amount(displayed),
        real=Amount(real),
        scenario=scenario,
        inventory_delta=InventoryDelta(value=Amount(real)),
    )


__all__ = ["resolve", "weighted_pick"]
