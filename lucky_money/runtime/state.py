"""Game state aggregate and its JSON persistence.

Only ``inventory``, ``history`` and ``rigging`` are written to disk. The admin
session flag lives in memory and always starts out ``False``.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable

from lucky_money.core.errors import GameStateError
from lucky_money.history.models import HistoryLog
from lucky_money.inventory.models import Inventory
from lucky_money.rigging.models import RANDOM, RiggingConfig, rigging_from_dict, rigging_to_dict

LOGGER = logging.getLogger("lucky_money.runtime")

DEFAULT_STORAGE_KEY = "tet-lucky-money-data"


@dataclass(slots=True)
class GameState:
    """Everything the store owns, as one consistent unit."""

    inventory: Inventory
    history: HistoryLog = field(default_factory=HistoryLog)
    rigging: RiggingConfig = RANDOM
    admin_authenticated: bool = False

    @classmethod
    def initial(cls, catalog: Iterable[tuple[int, int]] | None = None) -> "GameState":
        inventory = Inventory.from_catalog(catalog) if catalog is not None else Inventory.default()
        return cls(inventory=inventory)

    def copy(self) -> "GameState":
        return GameState(
            inventory=self.inventory.copy(),
            history=self.history.copy(),
            rigging=self.rigging,
            admin_authenticated=self.admin_authenticated,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Persisted form; the session flag is deliberately absent."""

        return {
            "denominations": self.inventory.to_list(),
            "spinHistory": self.history.to_list(),
            "riggingConfig": rigging_to_dict(self.rigging),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GameState":
        if not isinstance(payload, dict):
            raise TypeError("game state payload must be an object")
        return cls(
            inventory=Inventory.from_list(payload["denominations"]),
            history=HistoryLog.from_list(payload.get("spinHistory", [])),
            rigging=rigging_from_dict(payload.get("riggingConfig") or {}),
            admin_authenticated=False,
        )


class GameStateRepository:
    """File-based store for the persisted game record.

    The record is written to ``<data_dir>/<storage_key>.json``.
    """

    def __init__(self, data_dir: Path, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self.data_dir = data_dir
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.storage_key = storage_key
        self.path = self.data_dir / f"{storage_key}.json"

    def load(self) -> GameState | None:
        """Return the stored state, or ``None`` when absent or unreadable."""

        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return GameState.from_dict(payload)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            LOGGER.warning(
                "Discarding unreadable game state",
                extra={"path": str(self.path), "error": str(exc)},
            )
            return None

    def save(self, state: GameState) -> None:
        data = state.to_dict()
        try:
            self.path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as exc:  # pragma: no cover
            raise GameStateError(f"Failed to write {self.path.name}: {exc}") from exc

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


__all__ = ["DEFAULT_STORAGE_KEY", "GameState", "GameStateRepository"]
