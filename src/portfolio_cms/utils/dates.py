"""Clock helpers.

Timestamps are stored as naive UTC datetimes so that SQLite and MySQL
compare them the same way.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time, timedelta


def utcnow() -> datetime:
    """Return the current UTC time without tzinfo."""
    return datetime.now(UTC).replace(tzinfo=None)


def utc_today() -> date:
    """Return the current UTC calendar date."""
    return utcnow().date()


def start_of_window(days: int, today: date | None = None) -> datetime:
    """Return midnight of ``today - days``, the start of a trailing window."""
    today = today or utc_today()
    return datetime.combine(today - timedelta(days=days), time.min)
