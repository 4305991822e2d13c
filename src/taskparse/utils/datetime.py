"""Calendar arithmetic helpers.

This module provides the calendar-day operations the date resolution
engine builds on. Everything here works on ``datetime.date`` values; times
are attached separately by the parser.
"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Union


DateLike = Union[date, datetime]


def today_local() -> date:
    """Return today's date in the local timezone.

    Returns:
        The current calendar date
    """
    return datetime.now().date()


def as_date(value: Optional[DateLike]) -> date:
    """Normalise a reference date argument to a calendar date.

    Args:
        value: A date, a datetime, or None for today

    Returns:
        The calendar date the value refers to
    """
    if value is None:
        return today_local()
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(day: date, months: int) -> date:
    """Add calendar months, clamping the day to the target month's length.

    Args:
        day: Starting date
        months: Number of months to add (may be negative)

    Returns:
        The shifted date, e.g. Jan 31 + 1 month = Feb 28/29
    """
    month = day.month - 1 + months
    year = day.year + month // 12
    month = month % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def add_years(day: date, years: int) -> date:
    """Add calendar years; Feb 29 falls back to Feb 28 in common years."""
    return add_months(day, years * 12)


def next_weekday(day: date, weekday: int) -> date:
    """Return the next strictly-future date falling on ``weekday``.

    Args:
        day: Starting date
        weekday: Target weekday, 0=Monday ... 6=Sunday

    Returns:
        A date 1-7 days after ``day``; the same weekday yields a full week
    """
    days_ahead = (weekday - day.weekday()) % 7
    if days_ahead == 0:
        days_ahead = 7
    return day + timedelta(days=days_ahead)


def infer_year(day: int, month: int, reference: date, horizon: int = 8) -> Optional[date]:
    """Resolve a yearless day/month literal against a reference date.

    The reference year is used unless the date would already be in the
    past, in which case the next year that has such a day is used. The
    reference day itself is not considered past.

    Args:
        day: Day of month
        month: Month number
        reference: The date treated as "today"
        horizon: How many years ahead to look (covers Feb 29)

    Returns:
        The resolved date, or None if no year in the horizon has that day
    """
    for year in range(reference.year, reference.year + horizon + 1):
        try:
            candidate = date(year, month, day)
        except ValueError:
            continue
        if candidate >= reference:
            return candidate
    return None


def make_date(day: int, month: int, year: Optional[int], reference: date) -> Optional[date]:
    """Build a date from parsed literal parts.

    Args:
        day: Day of month
        month: Month number
        year: Four-digit year, two-digit year (20YY), or None
        reference: The date treated as "today" for yearless literals

    Returns:
        The date, or None if the parts do not form a real calendar day
    """
    if year is None:
        return infer_year(day, month, reference)
    if year < 100:
        year += 2000
    try:
        return date(year, month, day)
    except ValueError:
        return None


def combine(day: Optional[date], at: Optional[time]) -> Optional[datetime]:
    """Combine a calendar date with an optional time of day."""
    if day is None:
        return None
    return datetime.combine(day, at or time(0, 0))


def to_iso_string(value: Optional[Union[date, time]]) -> Optional[str]:
    """Convert a date or time to its ISO string, or None."""
    if value is None:
        return None
    return value.isoformat()
