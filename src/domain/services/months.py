"""Month window helpers."""

from datetime import date

from src.domain.constants import MONTH_LABELS, SUMMARY_WINDOW_MONTHS
from src.domain.models import MonthBucket
from src.utils.date_utils import month_end, shift_month


def month_key(value: date) -> str:
    """Return the ``YYYY-MM`` key of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def build_month_bucket(year: int, month: int) -> MonthBucket:
    return MonthBucket(
        key=f"{year:04d}-{month:02d}",
        label=MONTH_LABELS[month - 1],
        start=date(year, month, 1),
        end=month_end(year, month),
    )


def build_month_window(
    today: date,
    size: int = SUMMARY_WINDOW_MONTHS,
) -> list[MonthBucket]:
    """Return the rolling window ending with the month of ``today``.

    Args:
        today: Reference date; its month is the newest bucket.
        size: Number of months in the window.

    Returns:
        list[MonthBucket]: Buckets ordered oldest first.
    """
    if size < 1:
        raise ValueError(f"Window size must be positive, got {size}")
    buckets = []
    for offset in range(size - 1, -1, -1):
        year, month = shift_month(today.year, today.month, -offset)
        buckets.append(build_month_bucket(year, month))
    return buckets


__all__ = ["month_key", "build_month_bucket", "build_month_window"]
