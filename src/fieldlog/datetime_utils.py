"""
Timezone-aware datetime helpers for log timestamps.

All timestamps are normalised to UTC and rendered as ISO 8601 strings with
millisecond precision and a trailing ``Z``, e.g. ``2024-01-01T00:00:00.000Z``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

from .errors import ConfigurationError

Timestamp = Union[datetime, int, float]


def now_utc() -> datetime:
    """Return the current UTC time with timezone awareness."""
    return datetime.now(timezone.utc)


def coerce_timestamp(value: Timestamp) -> datetime:
    """
    Turn a clock reading into an aware UTC datetime.

    Args:
        value: A datetime (naive values are taken as UTC) or POSIX epoch
            seconds as returned by ``time.time()``.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise ConfigurationError(f"clock returned out-of-range epoch seconds: {value!r}") from exc
    raise ConfigurationError(f"clock returned unsupported value: {value!r}")


def isoformat_utc(value: Optional[Timestamp] = None) -> str:
    """
    Convert a clock reading to an ISO 8601 string in UTC with milliseconds.

    Args:
        value: The instant to format. When omitted, `now_utc()` is used.
    """
    dt = coerce_timestamp(now_utc() if value is None else value)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


__all__ = ["Timestamp", "now_utc", "coerce_timestamp", "isoformat_utc"]
