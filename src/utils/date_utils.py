"""Helpers for date normalization and month arithmetic."""

from calendar import monthrange
from datetime import date, datetime


def coerce_date(value) -> date | None:
    """Normalize date-like values returned by drivers.

    SQLite hands dates back as ISO strings while PostgreSQL returns native
    ``date`` or ``datetime`` objects.

    Args:
        value: Raw value from SQL or adapters.

    Returns:
        date | None: Normalized date, or None for empty values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Return the (year, month) pair ``offset`` months away."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_end(year: int, month: int) -> date:
    """Return the last calendar day of a month."""
    return date(year, month, monthrange(year, month)[1])


__all__ = ["coerce_date", "shift_month", "month_end"]
