"""Relative date modifiers and their resolution against a reference date."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, Type, Union

from .models import Weekday
from .utils.datetime import add_months, add_years, next_weekday


@dataclass(frozen=True)
class Today:
    pass


@dataclass(frozen=True)
class Tomorrow:
    pass


@dataclass(frozen=True)
class DayAfterTomorrow:
    pass


@dataclass(frozen=True)
class NextWeekday:
    weekday: Weekday


@dataclass(frozen=True)
class NextWeek:
    pass


@dataclass(frozen=True)
class NextMonth:
    pass


@dataclass(frozen=True)
class NextYear:
    pass


@dataclass(frozen=True)
class DaysOffset:
    days: int


RelativeDateModifier = Union[
    Today, Tomorrow, DayAfterTomorrow, NextWeekday, NextWeek, NextMonth, NextYear, DaysOffset
]


def _resolve_today(modifier: Today, reference: date) -> date:
    return reference


def _resolve_tomorrow(modifier: Tomorrow, reference: date) -> date:
    return reference + timedelta(days=1)


def _resolve_day_after_tomorrow(modifier: DayAfterTomorrow, reference: date) -> date:
    return reference + timedelta(days=2)


def _resolve_next_weekday(modifier: NextWeekday, reference: date) -> date:
    # Same weekday as the reference means the one a week later.
    return next_weekday(reference, int(modifier.weekday))


def _resolve_next_week(modifier: NextWeek, reference: date) -> date:
    return reference + timedelta(weeks=1)


def _resolve_next_month(modifier: NextMonth, reference: date) -> date:
    return add_months(reference, 1)


def _resolve_next_year(modifier: NextYear, reference: date) -> date:
    return add_years(reference, 1)


def _resolve_days_offset(modifier: DaysOffset, reference: date) -> date:
    return reference + timedelta(days=modifier.days)


RESOLVERS: Dict[Type, Callable[..., date]] = {
    Today: _resolve_today,
    Tomorrow: _resolve_tomorrow,
    DayAfterTomorrow: _resolve_day_after_tomorrow,
    NextWeekday: _resolve_next_weekday,
    NextWeek: _resolve_next_week,
    NextMonth: _resolve_next_month,
    NextYear: _resolve_next_year,
    DaysOffset: _resolve_days_offset,
}

# Names used by YAML language tables.
MODIFIER_NAMES: Dict[str, Type] = {
    "today": Today,
    "tomorrow": Tomorrow,
    "day_after_tomorrow": DayAfterTomorrow,
    "next_weekday": NextWeekday,
    "next_week": NextWeek,
    "next_month": NextMonth,
    "next_year": NextYear,
    "days_offset": DaysOffset,
}


def resolve_relative_date(modifier: RelativeDateModifier, reference: date) -> date:
    """Resolve a relative date modifier to a calendar date.

    Args:
        modifier: One of the RelativeDateModifier variants
        reference: The date treated as "today"

    Returns:
        The absolute calendar date

    Raises:
        TypeError: If ``modifier`` is not a known variant
    """
    resolver = RESOLVERS.get(type(modifier))
    if resolver is None:
        raise TypeError(f"Unsupported relative date modifier: {modifier!r}")
    return resolver(modifier, reference)
