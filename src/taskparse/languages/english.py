"""English keyword tables."""

from ..dates import DayAfterTomorrow, NextMonth, NextWeek, NextYear, Today, Tomorrow
from ..models import Frequency, Weekday
from .base import (
    CLOCK_TIME,
    DAY_OF_MONTH,
    ISO_DATE,
    MERIDIEM_TIME,
    LanguageConfig,
    RecurringKeyword,
    bounded,
    next_weekday_phrases,
    slash_date,
    weekly_keywords,
)


WEEKDAYS = {
    "monday": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY,
}

WEEKDAY_ABBREVIATIONS = {
    "mon": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "tues": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "thur": Weekday.THURSDAY,
    "thurs": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
    "sun": Weekday.SUNDAY,
}

WEEKDAY_PLURALS = {f"{name}s": weekday for name, weekday in WEEKDAYS.items()}

MONTHS = {
    "january": 1, "jan": 1,
    "february": 2, "feb": 2,
    "march": 3, "mar": 3,
    "april": 4, "apr": 4,
    "may": 5,
    "june": 6, "jun": 6,
    "july": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "october": 10, "oct": 10,
    "november": 11, "nov": 11,
    "december": 12, "dec": 12,
}

_SUFFIX = r"(?:st|nd|rd|th)"
_OF_MONTH = r"\s+(?:of|in)\s+(?:the\s+|each\s+|every\s+)?month"

ENGLISH = LanguageConfig(
    code="en",
    name="English",
    deadline_keywords=(
        "by", "due", "due by", "due on", "deadline", "until", "till", "before",
        "no later than",
    ),
    relative_dates={
        "today": Today(),
        "tonight": Today(),
        "this evening": Today(),
        "tomorrow": Tomorrow(),
        "tmrw": Tomorrow(),
        "tomorrow morning": Tomorrow(),
        "tomorrow night": Tomorrow(),
        "day after tomorrow": DayAfterTomorrow(),
        "the day after tomorrow": DayAfterTomorrow(),
        "next week": NextWeek(),
        "next month": NextMonth(),
        "next year": NextYear(),
        **next_weekday_phrases(("{}", "this {}", "next {}"), WEEKDAYS),
        **next_weekday_phrases(("next {}",), WEEKDAY_ABBREVIATIONS),
    },
    recurring_keywords={
        "daily": RecurringKeyword(Frequency.DAILY, interval=1),
        "every day": RecurringKeyword(Frequency.DAILY, interval=1),
        "each day": RecurringKeyword(Frequency.DAILY, interval=1),
        "everyday": RecurringKeyword(Frequency.DAILY, interval=1),
        "weekly": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "every week": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "each week": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "biweekly": RecurringKeyword(Frequency.WEEKLY, interval=2),
        "fortnightly": RecurringKeyword(Frequency.WEEKLY, interval=2),
        "monthly": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "every month": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "each month": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "last day of the month": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "last day of month": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "yearly": RecurringKeyword(Frequency.YEARLY, interval=1),
        "annually": RecurringKeyword(Frequency.YEARLY, interval=1),
        "every year": RecurringKeyword(Frequency.YEARLY, interval=1),
        "each year": RecurringKeyword(Frequency.YEARLY, interval=1),
        **weekly_keywords(("every", "each"), {**WEEKDAYS, **WEEKDAY_ABBREVIATIONS}),
        **weekly_keywords(("on",), WEEKDAY_PLURALS),
        **weekly_keywords(("",), WEEKDAY_PLURALS),
    },
    time_patterns=(
        MERIDIEM_TIME,
        r"(?<![\w:.])(?P<hour>1[0-2]|0?[1-9])\s+o'clock(?!\w)",
        r"(?<![\w:.])(?P<hour>1[0-2]|0?[1-9])\s+o’clock(?!\w)",
        CLOCK_TIME,
    ),
    date_patterns=(
        ISO_DATE,
        slash_date("md"),
        # "may" doubles as a verb, so it needs a suffix or a year after the day
        bounded(r"(?!may\b)(?P<month>{months})\.?\s+" + DAY_OF_MONTH + _SUFFIX + r"?(?:,?\s+(?P<year>\d{4}))?"),
        bounded(r"(?P<month>may)\s+" + DAY_OF_MONTH + r"(?=" + _SUFFIX + r"|,?\s+\d{4})" + _SUFFIX + r"?(?:,?\s+(?P<year>\d{4}))?"),
        bounded(r"(?:the\s+)?" + DAY_OF_MONTH + _SUFFIX + r"?\s+(?:of\s+)?(?P<month>{months})\.?(?:,?\s+(?P<year>\d{4}))?"),
    ),
    month_names=MONTHS,
    offset_patterns=(
        bounded(r"in\s+(?P<count>\d{1,3}|{numbers})\s+(?P<unit>{offset_units})"),
    ),
    offset_units={"day": 1, "days": 1, "week": 7, "weeks": 7},
    recurring_patterns=(
        # every 3 days, every other week
        bounded(r"(?:every|each)\s+(?P<interval>\d{1,3}|{numbers})\s+(?P<unit>{units})"),
        # every other monday
        bounded(r"(?:every|each)\s+(?P<interval>\d{1,3}|{numbers})\s+(?P<weekday>{weekdays})"),
        # every first monday (of the month)
        bounded(r"(?:every|each)\s+(?:the\s+)?(?P<ordinal>{ordinals})\s+(?P<weekday>{weekdays})(?:" + _OF_MONTH + ")?"),
        # first monday of the month
        bounded(r"(?:the\s+)?(?P<ordinal>{ordinals})\s+(?P<weekday>{weekdays})" + _OF_MONTH),
        # every 15th (of the month)
        bounded(r"(?:every|each)\s+(?:the\s+)?" + DAY_OF_MONTH + _SUFFIX + "(?:" + _OF_MONTH + ")?"),
        # monthly on the 15th
        bounded(r"monthly\s+on\s+(?:the\s+)?" + DAY_OF_MONTH + _SUFFIX + "?"),
        # on the 15th of every month
        bounded(r"(?:on\s+)?the\s+" + DAY_OF_MONTH + _SUFFIX + r"\s+of\s+(?:each|every)\s+month"),
    ),
    frequency_units={
        "day": Frequency.DAILY, "days": Frequency.DAILY,
        "week": Frequency.WEEKLY, "weeks": Frequency.WEEKLY,
        "month": Frequency.MONTHLY, "months": Frequency.MONTHLY,
        "year": Frequency.YEARLY, "years": Frequency.YEARLY,
    },
    number_words={
        "a": 1, "an": 1, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
        "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10, "eleven": 11,
        "twelve": 12, "other": 2, "second": 2, "third": 3, "fourth": 4,
    },
    ordinals={
        "first": 1, "1st": 1, "second": 2, "2nd": 2, "third": 3, "3rd": 3,
        "fourth": 4, "4th": 4, "fifth": 5, "5th": 5, "last": -1,
    },
    weekday_names={**WEEKDAYS, **WEEKDAY_PLURALS},
    weekday_abbreviations=WEEKDAY_ABBREVIATIONS,
    urgent_keywords=("urgent", "urgently", "asap"),
    date_prepositions=("on", "for"),
    time_connectors=("at", "around"),
    list_conjunctions=("and",),
)
