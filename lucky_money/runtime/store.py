"""GameStateStore: the single owner of the game state.

Interfaces call the operations below and render what they return; they never
touch inventory, history or rigging directly. Every operation is synchronous
and total: persistence failures are logged, unknown denominations become
no-ops, and an empty machine yields the ``empty`` outcome.
"""
from __future__ import annotations

import logging
import random
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable

from lucky_money.config.models import GameConfig
from lucky_money.core.errors import GameStateError, UnknownDenominationError
from lucky_money.core.time_utils import now_utc
from lucky_money.core.types import RandomSource
from lucky_money.history.models import SpinHistoryEntry
from lucky_money.inventory.models import DEFAULT_CATALOG
from lucky_money.rigging.models import RANDOM, RiggingConfig, describe_rigging
from lucky_money.runtime.state import GameState, GameStateRepository
from lucky_money.spin.models import SpinOutcome
from lucky_money.spin.resolver import resolve

DEFAULT_ADMIN_PIN = "1234"


class GameStateStore:
    """Owns inventory, history, rigging and the admin session flag."""

    def __init__(
        self,
        *,
        catalog: Iterable[tuple[int, int]] = DEFAULT_CATALOG,
        admin_pin: str = DEFAULT_ADMIN_PIN,
        repository: GameStateRepository | None = None,
        rng: RandomSource | None = None,
        now_fn: Callable[[], datetime] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = list(catalog)
        self._admin_pin = admin_pin
        self._repository = repository
        self._rng = rng or random.Random()
        self._now = now_fn or now_utc
        self.logger = logger or logging.getLogger("lucky_money.store")
        self._state = self._load_state()

    @classmethod
    def from_config(cls, config: GameConfig, base_dir: Path, **kwargs) -> "GameStateStore":
        """Build a store persisting under ``base_dir / config.storage.data_dir``."""

        repository = GameStateRepository(
            base_dir / config.storage.data_dir,
            storage_key=config.storage.storage_key,
        )
        rng = kwargs.pop("rng", None) or random.Random(config.rng_seed)
        return cls(
            catalog=config.catalog_pairs(),
            admin_pin=config.admin_pin,
            repository=repository,
            rng=rng,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def is_admin_authenticated(self) -> bool:
        return self._state.admin_authenticated

    @property
    def rigging(self) -> RiggingConfig:
        return self._state.rigging

    def snapshot(self) -> GameState:
        """Detached copy of the current state for rendering."""

        return self._state.copy()

    def total_value(self) -> int:
        return self._state.inventory.total_value()

    # ------------------------------------------------------------------
    # Admin session
    # ------------------------------------------------------------------
    def login(self, pin: str) -> bool:
        if pin != self._admin_pin:
            self.logger.info("Admin login rejected")
            return False
        self._state.admin_authenticated = True
        self.logger.info("Admin logged in")
        return True

    def logout(self) -> None:
        self._state.admin_authenticated = False
        self.logger.info("Admin logged out")

    # ------------------------------------------------------------------
    # Admin mutations
    # ------------------------------------------------------------------
    def set_rigging(self, rigging: RiggingConfig) -> None:
        self._state.rigging = rigging
        self.logger.info("Rigging updated", extra={"rigging": describe_rigging(rigging)})
        self._persist()

    def adjust_quantity(self, value: int, delta: int) -> None:
        try:
            denom = self._state.inventory.adjust(value, delta)
        except UnknownDenominationError as exc:
            self.logger.warning("Ignoring stock change for unknown denomination", extra={"value": exc.value})
            return
        self.logger.info(
            "Stock adjusted",
            extra={"value": int(denom.value), "delta": delta, "quantity": int(denom.quantity)},
        )
        self._persist()

    def reset_inventory(self) -> None:
        self._state.inventory.reset()
        self.logger.info("Inventory reset", extra={"total_value": self.total_value()})
        self._persist()

    # ------------------------------------------------------------------
    # Spin
    # ------------------------------------------------------------------
    def spin(self, user_name: str) -> SpinOutcome:
        """Resolve one spin and commit its effects in a single step.

        Stock and rigging change only when something was paid out; an empty
        machine still records the attempt in history.
        """

        state = self._state
        outcome = resolve(state.inventory, state.rigging, self._rng, user_name)
        if outcome.inventory_delta is not None:
            delta = outcome.inventory_delta
            state.inventory.adjust(delta.value, delta.change)
            state.rigging = RANDOM
        entry = SpinHistoryEntry(
            user_name=user_name,
            displayed_value=outcome.displayed,
            real_value=outcome.real,
            scenario=outcome.scenario,
            timestamp=self._now(),
        )
        state.history.prepend(entry)
        self.logger.info(
            "Spin resolved",
            extra={
                "user_name": entry.display_name,
                "scenario": outcome.scenario,
                "displayed_value": int(outcome.displayed),
                "real_value": int(outcome.real),
            },
        )
        self._persist()
        return outcome

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _load_state(self) -> GameState:
        initial = GameState.initial(self._catalog)
        if self._repository is None:
            return initial
        stored = self._repository.load()
        if stored is None:
            return initial
        if stored.inventory.values() != initial.inventory.values():
            self.logger.warning(
                "Stored catalog differs from configured catalog, starting fresh",
                extra={"stored": [int(v) for v in stored.inventory.values()]},
            )
            return initial
        return stored

    def _persist(self) -> None:
        if self._repository is None:
            return
        try:
            self._repository.save(self._state)
        except GameStateError as exc:
            self.logger.error("Failed to persist game state", exc_info=exc)


__all__ = ["DEFAULT_ADMIN_PIN", "GameStateStore"]
