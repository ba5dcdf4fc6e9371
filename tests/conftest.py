from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Callable

import pytest

from lucky_money.config.models import GameConfig, PresentationConfig
from lucky_money.inventory.models import Inventory
from lucky_money.runtime.state import GameStateRepository
from lucky_money.runtime.store import GameStateStore


class FixedRandom:
    """Random source replaying preset draws in a loop."""

    def __init__(self, *draws: float) -> None:
        self._draws = list(draws) or [0.0]
        self.calls = 0

    def random(self) -> float:
        value = self._draws[self.calls % len(self._draws)]
        self.calls += 1
        return value


class SteppingClock:
    """Deterministic ``now_fn`` advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self._current = start or datetime(2024, 2, 10, 1, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self._current
        self._current += timedelta(seconds=1)
        return value


@pytest.fixture
def fixed_random() -> Callable[..., FixedRandom]:
    return FixedRandom


@pytest.fixture
def small_inventory() -> Inventory:
    return Inventory.from_catalog([(10_000, 2), (20_000, 3), (50_000, 0), (500_000, 1)])


@pytest.fixture
def repository(tmp_path: Path) -> GameStateRepository:
    return GameStateRepository(tmp_path / "runtime")


@pytest.fixture
def store_factory(repository: GameStateRepository) -> Callable[..., GameStateStore]:
    def _factory(**overrides: object) -> GameStateStore:
        payload: dict[str, object] = {
            "repository": repository,
            "rng": FixedRandom(0.0),
            "now_fn": SteppingClock(),
        }
        payload.update(overrides)
        return GameStateStore(**payload)  # type: ignore[arg-type]

    return _factory


@pytest.fixture
def store(store_factory: Callable[..., GameStateStore]) -> GameStateStore:
    return store_factory()


@pytest.fixture
def game_config() -> GameConfig:
    return GameConfig(presentation=PresentationConfig(spin_delay_sec=0, reveal_delay_sec=0, history_page_size=5))


class FakeChat:
    def __init__(self) -> None:
        self.messages: list[str] = []

    async def send_message(self, text: str) -> None:
        self.messages.append(text)


@pytest.fixture
def fake_chat() -> FakeChat:
    return FakeChat()


@pytest.fixture
def make_update(fake_chat: FakeChat) -> Callable[..., tuple[SimpleNamespace, SimpleNamespace]]:
    def _make(*args: str) -> tuple[SimpleNamespace, SimpleNamespace]:
        update = SimpleNamespace(effective_chat=fake_chat)
        context = SimpleNamespace(args=list(args))
        return update, context

    return _make
