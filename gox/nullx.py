"""Optional values that treat blank strings and zero times as missing."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


def string_from(s: str) -> str | None:
    """Return ``s`` trimmed, or None when nothing is left."""
    s = s.strip()
    return s or None


def null_string() -> str | None:
    """Return the missing string value."""
    return string_from("")


def _is_zero(t: datetime) -> bool:
    offset = t.utcoffset() or timedelta(0)
    return t.replace(tzinfo=None) - datetime.min == offset


def time_from(t: datetime) -> datetime | None:
    """Return ``t``, or None when it is the zero time (year 1, midnight UTC)."""
    return None if _is_zero(t) else t


def null_time() -> datetime | None:
    """Return the missing time value."""
    return time_from(_ZERO_TIME)