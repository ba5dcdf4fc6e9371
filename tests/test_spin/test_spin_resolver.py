from __future__ import annotations

import random

from lucky_money.core.enums import Scenario
from lucky_money.inventory.models import Inventory
from lucky_money.rigging.models import RANDOM, ForceValue, TrollFakeThenReal
from lucky_money.spin.models import EMPTY_OUTCOME, InventoryDelta
from lucky_money.spin.resolver import resolve


def test_resolve_should_return_empty_outcome_without_drawing(fixed_random) -> None:
    inventory = Inventory.from_catalog([(10_000, 0), (20_000, 0)])
    rng = fixed_random(0.4)
    outcome = resolve(inventory, ForceValue(target=10_000), rng, "Lan")
    assert outcome == EMPTY_OUTCOME
    assert (outcome.displayed, outcome.real, outcome.scenario) == (0, 0, Scenario.EMPTY)
    assert outcome.inventory_delta is None
    assert outcome.is_empty is True
    assert rng.calls == 0
    assert [d.quantity for d in inventory] == [0, 0]


def test_resolve_random_should_pay_weighted_pick(small_inventory: Inventory, fixed_random) -> None:
    outcome = resolve(small_inventory, RANDOM, fixed_random(0.5), "Lan")
    assert outcome.scenario is Scenario.RANDOM
    assert outcome.displayed == outcome.real == 20_000
    assert outcome.inventory_delta == InventoryDelta(value=20_000, change=-1)


def test_resolve_forced_should_pay_target(small_inventory: Inventory, fixed_random) -> None:
    rng = fixed_random(0.0)
    outcome = resolve(small_inventory, ForceValue(target=500_000), rng, "Lan")
    assert outcome.scenario is Scenario.FORCED
    assert outcome.displayed == outcome.real == 500_000
    assert outcome.inventory_delta == InventoryDelta(value=500_000)
    assert rng.calls == 0


def test_resolve_forced_should_fall_back_when_target_exhausted(small_inventory: Inventory, fixed_random) -> None:
    forced = resolve(small_inventory, ForceValue(target=50_000), fixed_random(0.5), "Lan")
    honest = resolve(small_inventory, RANDOM, fixed_random(0.5), "Lan")
    assert forced == honest
    assert forced.scenario is Scenario.RANDOM


def test_resolve_forced_fallback_should_match_random_distribution() -> None:
    inventory = Inventory.default()
    inventory.adjust(100_000, -8)
    forced_rng = random.Random(11)
    honest_rng = random.Random(11)
    forced = [resolve(inventory, ForceValue(target=100_000), forced_rng).real for _ in range(500)]
    honest = [resolve(inventory, RANDOM, honest_rng).real for _ in range(500)]
    assert forced == honest
    assert 100_000 not in forced


def test_resolve_troll_should_show_fake_and_pay_real(fixed_random) -> None:
    inventory = Inventory.default()
    outcome = resolve(inventory, TrollFakeThenReal(displayed=500_000, real=20_000), fixed_random(0.9), "Lan")
    assert outcome.displayed == 500_000
    assert outcome.real == 20_000
    assert outcome.scenario is Scenario.TROLL_FAKE_TO_REAL
    assert outcome.is_troll is True
    assert outcome.inventory_delta == InventoryDelta(value=20_000)


def test_resolve_troll_fake_value_is_cosmetic(small_inventory: Inventory, fixed_random) -> None:
    outcome = resolve(small_inventory, TrollFakeThenReal(displayed=999_999, real=10_000), fixed_random(0.9), "Lan")
    assert outcome.displayed == 999_999
    assert outcome.real == 10_000


def test_resolve_troll_should_fall_back_when_target_unavailable(small_inventory: Inventory, fixed_random) -> None:
    exhausted = resolve(small_inventory, TrollFakeThenReal(displayed=500_000, real=50_000), fixed_random(0.0), "Lan")
    unknown = resolve(small_inventory, TrollFakeThenReal(displayed=500_000, real=7_000), fixed_random(0.0), "Lan")
    for outcome in (exhausted, unknown):
        assert outcome.scenario is Scenario.RANDOM
        assert outcome.displayed == outcome.real == 10_000


def test_resolve_should_not_mutate_inventory(small_inventory: Inventory, fixed_random) -> None:
    before = [d.quantity for d in small_inventory]
    resolve(small_inventory, ForceValue(target=20_000), fixed_random(0.0), "Lan")
    assert [d.quantity for d in small_inventory] == before
