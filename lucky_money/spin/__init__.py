"""Spin resolution package."""

from .models import EMPTY_OUTCOME, InventoryDelta, SpinOutcome
from .resolver import resolve, weighted_pick

__all__ = ["EMPTY_OUTCOME", "InventoryDelta", "SpinOutcome", "resolve", "weighted_pick"]
