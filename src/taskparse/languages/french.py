"""French keyword tables."""

from ..dates import DayAfterTomorrow, NextMonth, NextWeek, NextYear, Today, Tomorrow
from ..models import Frequency, Weekday
from .base import (
    CLOCK_TIME,
    DAY_OF_MONTH,
    ISO_DATE,
    LanguageConfig,
    RecurringKeyword,
    bounded,
    next_weekday_phrases,
    slash_date,
    weekly_keywords,
)


WEEKDAYS = {
    "lundi": Weekday.MONDAY,
    "mardi": Weekday.TUESDAY,
    "mercredi": Weekday.WEDNESDAY,
    "jeudi": Weekday.THURSDAY,
    "vendredi": Weekday.FRIDAY,
    "samedi": Weekday.SATURDAY,
    "dimanche": Weekday.SUNDAY,
}

WEEKDAY_PLURALS = {f"{name}s": weekday for name, weekday in WEEKDAYS.items()}

MONTHS = {
    "janvier": 1, "janv": 1,
    "février": 2, "fevrier": 2, "févr": 2, "fevr": 2,
    "mars": 3,
    "avril": 4, "avr": 4,
    "mai": 5,
    "juin": 6,
    "juillet": 7, "juil": 7,
    "août": 8, "aout": 8,
    "septembre": 9, "sept": 9,
    "octobre": 10, "oct": 10,
    "novembre": 11, "nov": 11,
    "décembre": 12, "decembre": 12, "déc": 12, "dec": 12,
}

_EVERY = r"(?:tous|toutes)\s+les"
_OF_MONTH = r"\s+(?:du|de\s+chaque)\s+mois"

FRENCH = LanguageConfig(
    code="fr",
    name="Français",
    deadline_keywords=(
        "avant", "avant le", "pour", "pour le", "d'ici", "d'ici le", "jusqu'à",
        "jusqu'au", "au plus tard", "au plus tard le", "date limite", "échéance",
    ),
    relative_dates={
        "aujourd'hui": Today(),
        "ce soir": Today(),
        "cet après-midi": Today(),
        "demain": Tomorrow(),
        "demain matin": Tomorrow(),
        "demain soir": Tomorrow(),
        "après-demain": DayAfterTomorrow(),
        "après demain": DayAfterTomorrow(),
        "la semaine prochaine": NextWeek(),
        "semaine prochaine": NextWeek(),
        "le mois prochain": NextMonth(),
        "mois prochain": NextMonth(),
        "l'année prochaine": NextYear(),
        "l'an prochain": NextYear(),
        "année prochaine": NextYear(),
        **next_weekday_phrases(("{}", "{} prochain", "ce {}"), WEEKDAYS),
    },
    recurring_keywords={
        "quotidien": RecurringKeyword(Frequency.DAILY, interval=1),
        "quotidienne": RecurringKeyword(Frequency.DAILY, interval=1),
        "quotidiennement": RecurringKeyword(Frequency.DAILY, interval=1),
        "chaque jour": RecurringKeyword(Frequency.DAILY, interval=1),
        "tous les jours": RecurringKeyword(Frequency.DAILY, interval=1),
        "hebdomadaire": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "chaque semaine": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "toutes les semaines": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "mensuel": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "mensuelle": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "mensuellement": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "chaque mois": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "tous les mois": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "le dernier jour du mois": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "dernier jour du mois": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "annuel": RecurringKeyword(Frequency.YEARLY, interval=1),
        "annuelle": RecurringKeyword(Frequency.YEARLY, interval=1),
        "annuellement": RecurringKeyword(Frequency.YEARLY, interval=1),
        "chaque année": RecurringKeyword(Frequency.YEARLY, interval=1),
        "tous les ans": RecurringKeyword(Frequency.YEARLY, interval=1),
        **weekly_keywords(("chaque",), WEEKDAYS),
        **weekly_keywords(("tous les",), WEEKDAY_PLURALS),
    },
    time_patterns=(
        # 14h00, 14h, 14 h 30
        r"(?<![\w:.])(?P<hour>\d{1,2})\s?h(?:\s?(?P<minute>\d{2}))?(?!\w)",
        # 14 heures
        r"(?<![\w:.])(?P<hour>\d{1,2})\s+heures?(?!\w)",
        CLOCK_TIME,
    ),
    date_patterns=(
        ISO_DATE,
        slash_date("dm"),
        # 1er octobre, 25 octobre 2026
        bounded(DAY_OF_MONTH + r"(?:er)?\s+(?P<month>{months})\.?(?:\s+(?P<year>\d{4}))?"),
    ),
    month_names=MONTHS,
    offset_patterns=(
        bounded(r"dans\s+(?P<count>\d{1,3}|{numbers})\s+(?P<unit>{offset_units})"),
    ),
    offset_units={"jour": 1, "jours": 1, "semaine": 7, "semaines": 7},
    recurring_patterns=(
        # tous les 3 jours, toutes les deux semaines
        bounded(_EVERY + r"\s+(?P<interval>\d{1,3}|{numbers})\s+(?P<unit>{units})"),
        # un lundi sur deux
        bounded(r"une?\s+(?P<weekday>{weekdays})\s+sur\s+(?P<interval>\d{1,2}|{numbers})"),
        # tous les deux lundis
        bounded(_EVERY + r"\s+(?P<interval>\d{1,2}|{numbers})\s+(?P<weekday>{weekdays})"),
        # chaque premier lundi (du mois)
        bounded(r"(?:chaque|" + _EVERY + r")\s+(?P<ordinal>{ordinals})s?\s+(?P<weekday>{weekdays})(?:" + _OF_MONTH + ")?"),
        # le premier lundi du mois
        bounded(r"(?:le\s+)?(?P<ordinal>{ordinals})\s+(?P<weekday>{weekdays})" + _OF_MONTH),
        # chaque 15 (du mois)
        bounded(r"(?:chaque|" + _EVERY + r")\s+" + DAY_OF_MONTH + r"(?:er)?(?:" + _OF_MONTH + ")?"),
        # le 15 de chaque mois
        bounded(r"(?:le\s+)?" + DAY_OF_MONTH + r"(?:er)?\s+de\s+chaque\s+mois"),
    ),
    frequency_units={
        "jour": Frequency.DAILY, "jours": Frequency.DAILY,
        "semaine": Frequency.WEEKLY, "semaines": Frequency.WEEKLY,
        "mois": Frequency.MONTHLY,
        "an": Frequency.YEARLY, "ans": Frequency.YEARLY,
        "année": Frequency.YEARLY, "années": Frequency.YEARLY,
    },
    number_words={
        "un": 1, "une": 1, "deux": 2, "trois": 3, "quatre": 4, "cinq": 5, "six": 6,
        "sept": 7, "huit": 8, "neuf": 9, "dix": 10, "onze": 11, "douze": 12,
    },
    ordinals={
        "premier": 1, "première": 1, "1er": 1, "1re": 1,
        "deuxième": 2, "second": 2, "seconde": 2, "2e": 2,
        "troisième": 3, "3e": 3,
        "quatrième": 4, "4e": 4,
        "cinquième": 5, "5e": 5,
        "dernier": -1, "dernière": -1,
    },
    weekday_names={**WEEKDAYS, **WEEKDAY_PLURALS},
    urgent_keywords=("urgent", "urgente", "asap", "au plus vite"),
    date_prepositions=("le", "ce"),
    time_connectors=("à", "a", "vers", "dès"),
    list_conjunctions=("et",),
)
