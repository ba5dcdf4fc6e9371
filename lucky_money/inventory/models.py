"""Denomination catalog and stock bookkeeping.

The catalog is an ordered list fixed at startup: stock counts change, the set
of values never does. Order matters because the weighted pick walks the
catalog front to back and falls back to its first available entry.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, Iterator, List, Sequence

from lucky_money.core.errors import UnknownDenominationError
from lucky_money.core.types import Amount, Quantity

DEFAULT_CATALOG: tuple[tuple[int, int], ...] = (
    (10_000, 20),
    (20_000, 15),
    (50_000, 10),
    (100_000, 8),
    (200_000, 5),
    (500_000, 2),
)


@dataclass(slots=True)
class Denomination:
    """One banknote value with its remaining and starting stock."""

    value: Amount
    quantity: Quantity
    initial_quantity: Quantity

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Denomination value must be positive")
        if self.quantity < 0 or self.initial_quantity < 0:
            raise ValueError("Denomination quantities must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": int(self.value),
            "quantity": int(self.quantity),
            "initial_quantity": int(self.initial_quantity),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Denomination":
        return cls(
            value=Amount(int(payload["value"])),
            quantity=Quantity(int(payload["quantity"])),
            initial_quantity=Quantity(int(payload["initial_quantity"])),
        )


class Inventory:
    """Ordered, fixed catalog of denominations.

    Only ``quantity >= 0`` is enforced. Administrators may push a quantity
    above its ``initial_quantity``; :meth:`reset` brings it back.
    """

    def __init__(self, denominations: Iterable[Denomination]) -> None:
        self._denominations: List[Denomination] = list(denominations)
        values = [d.value for d in self._denominations]
        if len(values) != len(set(values)):
            raise ValueError("Denomination values must be unique per catalog")

    @classmethod
    def from_catalog(cls, catalog: Iterable[tuple[int, int]]) -> "Inventory":
        """Build a fresh inventory where every quantity starts at its initial count."""

        return cls(
            Denomination(value=Amount(value), quantity=Quantity(qty), initial_quantity=Quantity(qty))
            for value, qty in catalog
        )

    @classmethod
    def default(cls) -> "Inventory":
        return cls.from_catalog(DEFAULT_CATALOG)

    def __iter__(self) -> Iterator[Denomination]:
        return iter(self._denominations)

    def __len__(self) -> int:
        return len(self._denominations)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def values(self) -> list[Amount]:
        return [d.value for d in self._denominations]

    def contains(self, value: int) -> bool:
        return any(d.value == value for d in self._denominations)

    def get(self, value: int) -> Denomination:
        for denom in self._denominations:
            if denom.value == value:
                return denom
        raise UnknownDenominationError(value)

    def available(self) -> list[Denomination]:
        """Denominations with stock left, in catalog order."""

        return [d for d in self._denominations if d.quantity > 0]

    def total_quantity(self) -> int:
        return sum(d.quantity for d in self._denominations)

    def total_value(self) -> int:
        """Money still in the machine (admin display only)."""

        return sum(d.value * d.quantity for d in self._denominations)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def adjust(self, value: int, delta: int) -> Denomination:
        """Shift the stock of ``value`` by ``delta``, clamping at zero."""

        denom = self.get(value)
        denom.quantity = Quantity(max(0, denom.quantity + delta))
        return denom

    def reset(self) -> None:
        for denom in self._denominations:
            denom.quantity = denom.initial_quantity

    def copy(self) -> "Inventory":
        return Inventory(replace(d) for d in self._denominations)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_list(self) -> list[Dict[str, Any]]:
        return [d.to_dict() for d in self._denominations]

    @classmethod
    def from_list(cls, payload: Sequence[Dict[str, Any]]) -> "Inventory":
        if not isinstance(payload, Sequence):
            raise TypeError("inventory payload must be a list")
        return cls(Denomination.from_dict(entry) for entry in payload)


__all__ = ["DEFAULT_CATALOG", "Denomination", "Inventory"]
