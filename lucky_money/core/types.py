"""Shared type aliases for readability and contract enforcement."""
from __future__ import annotations

from typing import NewType, Protocol

Amount = NewType("Amount", int)
Quantity = NewType("Quantity", int)


class RandomSource(Protocol):
    """Anything exposing ``random() -> float`` in ``[0, 1)``.

    :class:`random.Random` satisfies it; tests pass stubs with fixed draws.
    """

    def random(self) -> float: ...
