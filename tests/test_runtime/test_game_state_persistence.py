from __future__ import annotations

import json

import pytest

from lucky_money.config.models import GameConfig, StorageConfig
from lucky_money.core.enums import Scenario
from lucky_money.rigging.models import RANDOM, ForceValue
from lucky_money.runtime.state import GameState, GameStateRepository
from lucky_money.runtime.store import GameStateStore


def test_store_should_restore_persisted_state(store_factory, repository: GameStateRepository) -> None:
    store = store_factory()
    store.spin("Minh")
    store.adjust_quantity(50_000, -3)
    store.set_rigging(ForceValue(target=100_000))
    store.login("1234")

    restored = store_factory()
    snapshot = restored.snapshot()
    assert restored.is_admin_authenticated is False
    assert restored.rigging == ForceValue(target=100_000)
    assert snapshot.inventory.get(50_000).quantity == 7
    assert snapshot.inventory.get(10_000).quantity == 19
    assert len(snapshot.history) == 1
    assert snapshot.history[0].user_name == "Minh"
    assert snapshot.history[0].scenario is Scenario.RANDOM


def test_persisted_record_should_exclude_admin_flag(store, repository: GameStateRepository) -> None:
    store.login("1234")
    store.spin("Minh")
    payload = json.loads(repository.path.read_text(encoding="utf-8"))
    assert set(payload) == {"denominations", "spinHistory", "riggingConfig"}
    assert "isAdminAuthenticated" not in json.dumps(payload)
    assert repository.path.name == "tet-lucky-money-data.json"


def test_store_should_fall_back_to_defaults_on_corrupted_file(store_factory, repository: GameStateRepository) -> None:
    repository.path.write_text("{not json", encoding="utf-8")
    store = store_factory()
    snapshot = store.snapshot()
    assert len(snapshot.history) == 0
    assert store.rigging == RANDOM
    assert store.total_value() == 3_800_000


def test_store_should_fall_back_to_defaults_on_malformed_record(store_factory, repository: GameStateRepository) -> None:
    repository.path.write_text(json.dumps({"denominations": [{"value": 10_000}]}), encoding="utf-8")
    assert store_factory().total_value() == 3_800_000


def _record_with(**fields: object) -> str:
    payload = GameState.initial().to_dict()
    payload["denominations"][0]["quantity"] = 1
    payload.update(fields)
    return json.dumps(payload)


_HISTORY_ENTRY = {
    "id": "abc",
    "timestamp": "2024-02-10T01:00:00+00:00",
    "user_name": "Minh",
    "display_value": 10_000,
    "real_value": 10_000,
    "scenario_used": "random",
}


@pytest.mark.parametrize(
    "fields",
    [
        {"riggingConfig": "random"},
        {"riggingConfig": [1, 2]},
        {"riggingConfig": 5},
        {"riggingConfig": {"next_spin_mode": "jackpot"}},
        {"spinHistory": "Minh"},
        {"spinHistory": {"0": _HISTORY_ENTRY}},
        {"spinHistory": [5]},
        {"spinHistory": [{**_HISTORY_ENTRY, "scenario_used": "lucky"}]},
        {"spinHistory": [{**_HISTORY_ENTRY, "timestamp": 17}]},
        {"denominations": "10000"},
    ],
)
def test_store_should_fall_back_to_defaults_on_mistyped_record(
    store_factory, repository: GameStateRepository, fields: dict
) -> None:
    repository.path.write_text(_record_with(**fields), encoding="utf-8")
    store = store_factory()
    assert store.total_value() == 3_800_000
    assert len(store.snapshot().history) == 0
    assert store.rigging == RANDOM


def test_store_should_keep_record_when_rigging_target_is_zero(store_factory, repository: GameStateRepository) -> None:
    record = _record_with(
        spinHistory=[_HISTORY_ENTRY],
        riggingConfig={"next_spin_mode": "force_value", "target_value": 0, "fake_value": None},
    )
    repository.path.write_text(record, encoding="utf-8")
    store = store_factory()
    assert store.rigging == RANDOM
    assert store.snapshot().inventory.get(10_000).quantity == 1
    assert store.snapshot().history[0].user_name == "Minh"


def test_store_should_ignore_record_for_other_catalog(store_factory, repository: GameStateRepository) -> None:
    store_factory(catalog=[(1_000, 5)]).spin("Minh")
    store = store_factory()
    assert store.total_value() == 3_800_000
    assert len(store.snapshot().history) == 0


def test_store_from_config_should_persist_under_data_dir(tmp_path) -> None:
    config = GameConfig(storage=StorageConfig(data_dir="state", storage_key="unit-test"), rng_seed=5)
    store = GameStateStore.from_config(config, tmp_path)
    store.spin("Minh")
    assert (tmp_path / "state" / "unit-test.json").exists()
    assert GameStateStore.from_config(config, tmp_path).snapshot().history[0].user_name == "Minh"


def test_repository_should_return_none_when_missing(repository: GameStateRepository) -> None:
    assert repository.load() is None
    repository.clear()
    assert not repository.path.exists()
