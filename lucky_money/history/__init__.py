"""Spin history package."""

from .models import ANONYMOUS_NAME, HistoryLog, SpinHistoryEntry

__all__ = ["ANONYMOUS_NAME", "HistoryLog", "SpinHistoryEntry"]
