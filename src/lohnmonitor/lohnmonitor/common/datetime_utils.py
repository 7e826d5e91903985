from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union

DateLike = Union[date, datetime]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def as_date(value: DateLike) -> date:
    """Truncate a datetime to its calendar date; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(start: DateLike, months: int) -> date:
    """Add whole calendar months to a date.

    Rollover rule: the result is the first day of the target month plus
    ``start.day - 1`` days, so a day that does not exist in the target month
    spills into the following month (2023-01-31 + 1 month = 2023-03-03,
    2024-02-29 + 12 months = 2025-03-01).
    """
    start = as_date(start)
    total = start.month - 1 + int(months)
    year = start.year + total // 12
    month = total % 12 + 1
    return date(year, month, 1) + timedelta(days=start.day - 1)


def months_between(start: DateLike, end: DateLike) -> int:
    """Whole-month difference by year/month only (day of month is ignored)."""
    start = as_date(start)
    end = as_date(end)
    return (end.year - start.year) * 12 + (end.month - start.month)


def days_until(target: Optional[DateLike], today: DateLike) -> Optional[int]:
    """Calendar days from ``today`` to ``target``; negative once it has passed.

    Both sides are truncated to dates, so time of day never shifts the result.
    """
    if target is None:
        return None
    return (as_date(target) - as_date(today)).days
