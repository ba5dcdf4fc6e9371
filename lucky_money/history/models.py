"""Append-only spin history, newest entry first."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Sequence

from lucky_money.core.enums import Scenario
from lucky_money.core.time_utils import now_utc, parse_timestamp
from lucky_money.core.types import Amount

ANONYMOUS_NAME = "Anonymous"


@dataclass(frozen=True, slots=True)
class SpinHistoryEntry:
    """Immutable record of one resolved spin."""

    user_name: str
    displayed_value: Amount
    real_value: Amount
    scenario: Scenario
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=now_utc)

    @property
    def display_name(self) -> str:
        return self.user_name or ANONYMOUS_NAME

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "user_name": self.user_name,
            "display_value": int(self.displayed_value),
            "real_value": int(self.real_value),
            "scenario_used": self.scenario.value,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SpinHistoryEntry":
        return cls(
            id=str(payload["id"]),
            timestamp=parse_timestamp(payload["timestamp"]),
            user_name=str(payload.get("user_name") or ""),
            displayed_value=Amount(int(payload["display_value"])),
            real_value=Amount(int(payload["real_value"])),
            scenario=Scenario(payload["scenario_used"]),
        )


class HistoryLog:
    """Reverse-chronological log; ``log[0]`` is always the latest spin."""

    def __init__(self, entries: Iterable[SpinHistoryEntry] = ()) -> None:
        self._entries: List[SpinHistoryEntry] = list(entries)

    def __iter__(self) -> Iterator[SpinHistoryEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> SpinHistoryEntry:
        return self._entries[index]

    def prepend(self, entry: SpinHistoryEntry) -> None:
        self._entries.insert(0, entry)

    def latest(self, limit: int | None = None) -> list[SpinHistoryEntry]:
        if limit is None:
            return list(self._entries)
        return self._entries[: max(0, limit)]

    def copy(self) -> "HistoryLog":
        return HistoryLog(self._entries)

    def to_list(self) -> list[Dict[str, Any]]:
        return [entry.to_dict() for entry in self._entries]

    @classmethod
    def from_list(cls, payload: Sequence[Dict[str, Any]]) -> "HistoryLog":
        if not isinstance(payload, Sequence):
            raise TypeError("history payload must be a list")
        return cls(SpinHistoryEntry.from_dict(entry) for entry in payload)


__all__ = ["ANONYMOUS_NAME", "HistoryLog", "SpinHistoryEntry"]
