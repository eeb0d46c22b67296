"""Calendar helpers shared by the history computations.

All day-level grouping uses the UTC calendar day of an instant so that the
resolver, the reconstructor and the aggregator agree on where a day starts.
"""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta, timezone


def utc_today() -> date:
    """Return the current UTC calendar day."""
    return datetime.now(timezone.utc).date()


def to_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are assumed to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_day(value: datetime) -> date:
    """Return the UTC calendar day of an instant."""
    return to_utc(value).date()


def parse_instant(raw: str) -> datetime:
    """Parse an ISO 8601 instant into an aware UTC datetime.

    Args:
        raw: Timestamp such as ``2025-05-13T10:15:00Z`` or a bare date.

    Returns:
        datetime: Parsed instant in UTC.

    Raises:
        ValueError: If the value is not an ISO 8601 timestamp.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"Invalid ISO timestamp: {raw!r}")
    cleaned = raw.strip()
    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(cleaned))


def add_months(day: date, months: int) -> date:
    """Move a day by calendar months, clamping to the month's length.

    Args:
        day: Reference day.
        months: Number of calendar months to move; negative goes back.

    Returns:
        date: ``day`` shifted by ``months`` months.
    """
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def subtract_months(day: date, months: int) -> date:
    """Move a day back by calendar months, clamping to the month's length."""
    return add_months(day, -months)


def months_between(start: date, end: date) -> int:
    """Return the number of month boundaries from ``start`` to ``end``."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def iter_days_descending(end: date, start: date) -> Iterator[date]:
    """Yield every day from ``end`` down to ``start`` inclusive."""
    current = end
    while current >= start:
        yield current
        current -= timedelta(days=1)


def month_start(day: date) -> date:
    """Return the first day of the month containing ``day``."""
    return day.replace(day=1)


__all__ = [
    "add_months",
    "iter_days_descending",
    "month_start",
    "months_between",
    "parse_instant",
    "subtract_months",
    "to_utc",
    "utc_day",
    "utc_today",
]
