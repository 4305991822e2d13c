"""Tests for relative date resolution and calendar helpers."""

from datetime import date, datetime, time
from typing import get_args

import pytest

from taskparse.dates import (
    MODIFIER_NAMES,
    RESOLVERS,
    DayAfterTomorrow,
    DaysOffset,
    NextMonth,
    NextWeek,
    NextWeekday,
    NextYear,
    RelativeDateModifier,
    Today,
    Tomorrow,
    resolve_relative_date,
)
from taskparse.models import Weekday
from taskparse.utils.datetime import (
    add_months,
    add_years,
    as_date,
    combine,
    infer_year,
    make_date,
    next_weekday,
    to_iso_string,
)


REFERENCE = date(2026, 10, 19)  # Monday


class TestResolveRelativeDate:
    """Test resolve_relative_date."""

    def test_every_variant_has_a_resolver(self):
        assert set(RESOLVERS) == set(get_args(RelativeDateModifier))
        assert set(MODIFIER_NAMES.values()) == set(RESOLVERS)

    @pytest.mark.parametrize("modifier,expected", [
        (Today(), date(2026, 10, 19)),
        (Tomorrow(), date(2026, 10, 20)),
        (DayAfterTomorrow(), date(2026, 10, 21)),
        (NextWeek(), date(2026, 10, 26)),
        (NextMonth(), date(2026, 11, 19)),
        (NextYear(), date(2027, 10, 19)),
        (DaysOffset(3), date(2026, 10, 22)),
        (DaysOffset(-1), date(2026, 10, 18)),
    ])
    def test_fixed_modifiers(self, modifier, expected):
        assert resolve_relative_date(modifier, REFERENCE) == expected

    def test_next_weekday(self):
        assert resolve_relative_date(NextWeekday(Weekday.FRIDAY), REFERENCE) == date(2026, 10, 23)
        assert resolve_relative_date(NextWeekday(Weekday.SUNDAY), REFERENCE) == date(2026, 10, 25)

    def test_next_weekday_same_day_is_a_week_later(self):
        assert resolve_relative_date(NextWeekday(Weekday.MONDAY), REFERENCE) == date(2026, 10, 26)

    def test_next_month_clamps_day(self):
        assert resolve_relative_date(NextMonth(), date(2026, 1, 31)) == date(2026, 2, 28)

    def test_next_year_from_leap_day(self):
        assert resolve_relative_date(NextYear(), date(2028, 2, 29)) == date(2029, 2, 28)

    def test_unknown_modifier(self):
        with pytest.raises(TypeError):
            resolve_relative_date("tomorrow", REFERENCE)


class TestCalendarHelpers:
    """Test the date arithmetic helpers."""

    def test_add_months_across_year(self):
        assert add_months(date(2026, 11, 30), 3) == date(2027, 2, 28)
        assert add_months(date(2026, 3, 31), -1) == date(2026, 2, 28)

    def test_add_years(self):
        assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)

    def test_next_weekday_wraps(self):
        assert next_weekday(date(2026, 10, 25), 0) == date(2026, 10, 26)

    def test_infer_year(self):
        assert infer_year(25, 10, REFERENCE) == date(2026, 10, 25)
        assert infer_year(5, 10, REFERENCE) == date(2027, 10, 5)
        assert infer_year(19, 10, REFERENCE) == REFERENCE

    def test_infer_year_leap_day(self):
        assert infer_year(29, 2, REFERENCE) == date(2028, 2, 29)

    def test_infer_year_impossible(self):
        assert infer_year(31, 4, REFERENCE) is None

    def test_make_date(self):
        assert make_date(24, 12, 27, REFERENCE) == date(2027, 12, 24)
        assert make_date(24, 12, 2030, REFERENCE) == date(2030, 12, 24)
        assert make_date(29, 2, 2027, REFERENCE) is None

    def test_as_date(self):
        assert as_date(datetime(2026, 10, 19, 23, 59)) == REFERENCE
        assert as_date(REFERENCE) == REFERENCE
        assert isinstance(as_date(None), date)

    def test_combine_and_iso(self):
        assert combine(REFERENCE, time(9, 30)) == datetime(2026, 10, 19, 9, 30)
        assert combine(REFERENCE, None) == datetime(2026, 10, 19)
        assert combine(None, time(9, 30)) is None
        assert to_iso_string(REFERENCE) == "2026-10-19"
        assert to_iso_string(None) is None
