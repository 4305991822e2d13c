"""German keyword tables."""

from ..dates import DayAfterTomorrow, DaysOffset, NextMonth, NextWeek, NextYear, Today, Tomorrow
from ..models import Frequency, Weekday
from .base import (
    CLOCK_TIME,
    DAY_OF_MONTH,
    ISO_DATE,
    LanguageConfig,
    RecurringKeyword,
    bounded,
    next_weekday_phrases,
    weekly_keywords,
)


WEEKDAYS = {
    "montag": Weekday.MONDAY,
    "dienstag": Weekday.TUESDAY,
    "mittwoch": Weekday.WEDNESDAY,
    "donnerstag": Weekday.THURSDAY,
    "freitag": Weekday.FRIDAY,
    "samstag": Weekday.SATURDAY,
    "sonnabend": Weekday.SATURDAY,
    "sonntag": Weekday.SUNDAY,
}

# "montags" = on Mondays
WEEKDAY_ADVERBS = {f"{name}s": weekday for name, weekday in WEEKDAYS.items()}

MONTHS = {
    "januar": 1, "jänner": 1, "jan": 1,
    "februar": 2, "feb": 2,
    "märz": 3, "maerz": 3, "mär": 3, "mrz": 3,
    "april": 4, "apr": 4,
    "mai": 5,
    "juni": 6, "jun": 6,
    "juli": 7, "jul": 7,
    "august": 8, "aug": 8,
    "september": 9, "sep": 9, "sept": 9,
    "oktober": 10, "okt": 10,
    "november": 11, "nov": 11,
    "dezember": 12, "dez": 12,
}

_EVERY = r"jede[nrs]?"
_OF_MONTH = r"\s+(?:im|des|jeden)\s+monats?"

GERMAN = LanguageConfig(
    code="de",
    name="Deutsch",
    deadline_keywords=(
        "bis", "bis zum", "bis zur", "bis spätestens", "spätestens", "spätestens am",
        "deadline", "fällig", "fällig am",
    ),
    relative_dates={
        "heute": Today(),
        "heute morgen": Today(),
        "heute mittag": Today(),
        "heute abend": Today(),
        "heute nachmittag": Today(),
        "morgen": Tomorrow(),
        "morgen früh": Tomorrow(),
        "morgen mittag": Tomorrow(),
        "morgen nachmittag": Tomorrow(),
        "morgen abend": Tomorrow(),
        "übermorgen": DayAfterTomorrow(),
        "überübermorgen": DaysOffset(3),
        "nächste woche": NextWeek(),
        "nächster woche": NextWeek(),
        "kommende woche": NextWeek(),
        "nächsten monat": NextMonth(),
        "kommenden monat": NextMonth(),
        "nächstes jahr": NextYear(),
        "kommendes jahr": NextYear(),
        **next_weekday_phrases(
            ("{}", "nächsten {}", "nächster {}", "kommenden {}", "diesen {}"), WEEKDAYS
        ),
    },
    recurring_keywords={
        "täglich": RecurringKeyword(Frequency.DAILY, interval=1),
        "jeden tag": RecurringKeyword(Frequency.DAILY, interval=1),
        "wöchentlich": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "jede woche": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "zweiwöchentlich": RecurringKeyword(Frequency.WEEKLY, interval=2),
        "monatlich": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "jeden monat": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "am letzten tag des monats": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "letzten tag des monats": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "jährlich": RecurringKeyword(Frequency.YEARLY, interval=1),
        "jedes jahr": RecurringKeyword(Frequency.YEARLY, interval=1),
        **weekly_keywords(("jeden",), WEEKDAYS),
        **weekly_keywords(("",), WEEKDAY_ADVERBS),
    },
    time_patterns=(
        # 14:30 Uhr, 9.30 Uhr
        r"(?<![\w:.])(?P<hour>\d{1,2})[:.](?P<minute>\d{2})\s*uhr(?!\w)",
        # 14 Uhr
        r"(?<![\w:.])(?P<hour>\d{1,2})\s*uhr(?!\w)",
        CLOCK_TIME,
    ),
    date_patterns=(
        ISO_DATE,
        # 25.10. / 25.10.2026 / 25.10.26
        r"(?<![\w.])(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?:(?P<year>\d{4}|\d{2})(?!\d))?(?![\d\w])",
        # 25. Oktober 2026
        bounded(DAY_OF_MONTH + r"\.?\s*(?P<month>{months})\.?(?:\s+(?P<year>\d{4}))?"),
    ),
    month_names=MONTHS,
    offset_patterns=(
        bounded(r"in\s+(?P<count>\d{1,3}|{numbers})\s+(?P<unit>{offset_units})"),
    ),
    offset_units={
        "tag": 1, "tagen": 1, "tage": 1,
        "woche": 7, "wochen": 7,
    },
    recurring_patterns=(
        # alle 2 Wochen, jede zweite Woche
        bounded(r"(?:alle|" + _EVERY + r")\s+(?P<interval>\d{1,3}|{numbers})\s+(?P<unit>{units})"),
        # jeden zweiten Montag
        bounded(_EVERY + r"\s+(?P<interval>{numbers})\s+(?P<weekday>{weekdays})"),
        # jeden ersten Montag (im Monat)
        bounded(_EVERY + r"\s+(?P<ordinal>{ordinals})\s+(?P<weekday>{weekdays})(?:" + _OF_MONTH + ")?"),
        # erster Montag im Monat
        bounded(r"(?:am\s+)?(?P<ordinal>{ordinals})\s+(?P<weekday>{weekdays})" + _OF_MONTH),
        # jeden 15. (des Monats)
        bounded(_EVERY + r"\s+" + DAY_OF_MONTH + r"\.(?:" + _OF_MONTH + ")?"),
        # monatlich am 15.
        bounded(r"monatlich\s+am\s+" + DAY_OF_MONTH + r"\."),
    ),
    frequency_units={
        "tag": Frequency.DAILY, "tage": Frequency.DAILY,
        "woche": Frequency.WEEKLY, "wochen": Frequency.WEEKLY,
        "monat": Frequency.MONTHLY, "monate": Frequency.MONTHLY,
        "jahr": Frequency.YEARLY, "jahre": Frequency.YEARLY,
    },
    number_words={
        "ein": 1, "eine": 1, "einer": 1, "einem": 1, "einen": 1,
        "zwei": 2, "drei": 3, "vier": 4, "fünf": 5, "sechs": 6, "sieben": 7,
        "acht": 8, "neun": 9, "zehn": 10, "elf": 11, "zwölf": 12,
        "zweite": 2, "zweiten": 2, "dritte": 3, "dritten": 3, "vierte": 4, "vierten": 4,
    },
    ordinals={
        "erste": 1, "ersten": 1, "erster": 1, "1.": 1,
        "zweite": 2, "zweiten": 2, "zweiter": 2, "2.": 2,
        "dritte": 3, "dritten": 3, "dritter": 3, "3.": 3,
        "vierte": 4, "vierten": 4, "vierter": 4, "4.": 4,
        "fünfte": 5, "fünften": 5, "fünfter": 5, "5.": 5,
        "letzte": -1, "letzten": -1, "letzter": -1,
    },
    weekday_names={**WEEKDAYS, **WEEKDAY_ADVERBS},
    urgent_keywords=("dringend", "eilig", "asap", "sofort"),
    date_prepositions=("am", "ab", "für"),
    time_connectors=("um", "gegen", "ab"),
    list_conjunctions=("und",),
)
