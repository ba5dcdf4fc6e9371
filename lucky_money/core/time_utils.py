"""Utilities for dealing with timezones and timestamps.

History entries are stored in UTC and rendered in the configured timezone.
"""
from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

DEFAULT_TZ_NAME = "Asia/Ho_Chi_Minh"


def get_app_timezone(tz_name: str | None = None) -> ZoneInfo:
    """Return the ZoneInfo object for the configured timezone."""

    target_name = tz_name or DEFAULT_TZ_NAME
    return ZoneInfo(target_name)


def now_utc() -> datetime:
    """Return the current UTC datetime with tzinfo."""

    return datetime.now(timezone.utc)


def to_local(dt: datetime, tz_name: str | None = None) -> datetime:
    """Convert an aware datetime to the configured timezone."""

    if dt.tzinfo is None:
        raise ValueError("Datetime must be timezone-aware before conversion")
    return dt.astimezone(get_app_timezone(tz_name))


def parse_timestamp(value: str | datetime) -> datetime:
    """Parse an ISO timestamp, assuming UTC when no offset is present."""

    dt = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
