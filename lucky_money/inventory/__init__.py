"""Denomination inventory package."""

from .models import DEFAULT_CATALOG, Denomination, Inventory

__all__ = ["DEFAULT_CATALOG", "Denomination", "Inventory"]
