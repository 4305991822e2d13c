"""Spanish keyword tables."""

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
    "lunes": Weekday.MONDAY,
    "martes": Weekday.TUESDAY,
    "miércoles": Weekday.WEDNESDAY,
    "miercoles": Weekday.WEDNESDAY,
    "jueves": Weekday.THURSDAY,
    "viernes": Weekday.FRIDAY,
    "sábado": Weekday.SATURDAY,
    "sabado": Weekday.SATURDAY,
    "domingo": Weekday.SUNDAY,
}

# Only Saturday and Sunday take a plural form.
WEEKDAY_PLURALS = {
    "lunes": Weekday.MONDAY,
    "martes": Weekday.TUESDAY,
    "miércoles": Weekday.WEDNESDAY,
    "miercoles": Weekday.WEDNESDAY,
    "jueves": Weekday.THURSDAY,
    "viernes": Weekday.FRIDAY,
    "sábados": Weekday.SATURDAY,
    "sabados": Weekday.SATURDAY,
    "domingos": Weekday.SUNDAY,
}

MONTHS = {
    "enero": 1, "ene": 1,
    "febrero": 2, "feb": 2,
    "marzo": 3, "mar": 3,
    "abril": 4, "abr": 4,
    "mayo": 5,
    "junio": 6, "jun": 6,
    "julio": 7, "jul": 7,
    "agosto": 8, "ago": 8,
    "septiembre": 9, "setiembre": 9, "sep": 9, "sept": 9,
    "octubre": 10, "oct": 10,
    "noviembre": 11, "nov": 11,
    "diciembre": 12, "dic": 12,
}

_OF_MONTH = r"\s+de(?:l|\s+cada)\s+mes"

SPANISH = LanguageConfig(
    code="es",
    name="Español",
    deadline_keywords=(
        "para", "para el", "antes de", "antes del", "hasta", "hasta el", "límite",
        "fecha límite", "a más tardar", "a más tardar el",
    ),
    relative_dates={
        "hoy": Today(),
        "esta noche": Today(),
        "esta tarde": Today(),
        "esta mañana": Today(),
        "mañana": Tomorrow(),
        "manana": Tomorrow(),
        "pasado mañana": DayAfterTomorrow(),
        "pasado manana": DayAfterTomorrow(),
        "la próxima semana": NextWeek(),
        "próxima semana": NextWeek(),
        "la semana que viene": NextWeek(),
        "el próximo mes": NextMonth(),
        "próximo mes": NextMonth(),
        "el mes que viene": NextMonth(),
        "el próximo año": NextYear(),
        "próximo año": NextYear(),
        "el año que viene": NextYear(),
        **next_weekday_phrases(("{}", "el próximo {}", "próximo {}", "este {}"), WEEKDAYS),
    },
    recurring_keywords={
        "diario": RecurringKeyword(Frequency.DAILY, interval=1),
        "diariamente": RecurringKeyword(Frequency.DAILY, interval=1),
        "cada día": RecurringKeyword(Frequency.DAILY, interval=1),
        "cada dia": RecurringKeyword(Frequency.DAILY, interval=1),
        "todos los días": RecurringKeyword(Frequency.DAILY, interval=1),
        "todos los dias": RecurringKeyword(Frequency.DAILY, interval=1),
        "semanal": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "semanalmente": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "cada semana": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "todas las semanas": RecurringKeyword(Frequency.WEEKLY, interval=1),
        "quincenal": RecurringKeyword(Frequency.WEEKLY, interval=2),
        "mensual": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "mensualmente": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "cada mes": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "todos los meses": RecurringKeyword(Frequency.MONTHLY, interval=1),
        "el último día del mes": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "último día del mes": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "ultimo dia del mes": RecurringKeyword(Frequency.MONTHLY, interval=1, day_of_month=-1),
        "anual": RecurringKeyword(Frequency.YEARLY, interval=1),
        "anualmente": RecurringKeyword(Frequency.YEARLY, interval=1),
        "cada año": RecurringKeyword(Frequency.YEARLY, interval=1),
        "todos los años": RecurringKeyword(Frequency.YEARLY, interval=1),
        **weekly_keywords(("cada",), WEEKDAYS),
        **weekly_keywords(("todos los",), WEEKDAY_PLURALS),
    },
    time_patterns=(
        MERIDIEM_TIME,
        CLOCK_TIME,
        # 14h00, 14h
        r"(?<![\w:.])(?P<hour>\d{1,2})h(?P<minute>\d{2})?(?!\w)",
        # 14 horas
        r"(?<![\w:.])(?P<hour>\d{1,2})\s+horas(?!\w)",
    ),
    date_patterns=(
        ISO_DATE,
        slash_date("dm"),
        # 25 de octubre (de 2026)
        bounded(DAY_OF_MONTH + r"\s+de\s+(?P<month>{months})\.?(?:\s+del?\s+(?P<year>\d{4}))?"),
    ),
    month_names=MONTHS,
    offset_patterns=(
        bounded(r"(?:en|dentro\s+de)\s+(?P<count>\d{1,3}|{numbers})\s+(?P<unit>{offset_units})"),
    ),
    offset_units={"día": 1, "días": 1, "dia": 1, "dias": 1, "semana": 7, "semanas": 7},
    recurring_patterns=(
        # cada 2 semanas, cada dos días
        bounded(r"cada\s+(?P<interval>\d{1,3}|{numbers})\s+(?P<unit>{units})"),
        # cada dos lunes
        bounded(r"cada\s+(?P<interval>\d{1,2}|{numbers})\s+(?P<weekday>{weekdays})"),
        # cada primer lunes (del mes)
        bounded(r"cada\s+(?P<ordinal>{ordinals})\s+(?P<weekday>{weekdays})(?:" + _OF_MONTH + ")?"),
        # el primer lunes del mes
        bounded(r"(?:el\s+)?(?P<ordinal>{ordinals})\s+(?P<weekday>{weekdays})" + _OF_MONTH),
        # cada 15 (del mes)
        bounded(r"cada\s+(?:d[ií]a\s+)?" + DAY_OF_MONTH + r"(?:" + _OF_MONTH + ")?"),
        # el 15 de cada mes
        bounded(r"(?:el\s+(?:d[ií]a\s+)?)?" + DAY_OF_MONTH + r"\s+de\s+cada\s+mes"),
    ),
    frequency_units={
        "día": Frequency.DAILY, "días": Frequency.DAILY,
        "dia": Frequency.DAILY, "dias": Frequency.DAILY,
        "semana": Frequency.WEEKLY, "semanas": Frequency.WEEKLY,
        "mes": Frequency.MONTHLY, "meses": Frequency.MONTHLY,
        "año": Frequency.YEARLY, "años": Frequency.YEARLY,
    },
    number_words={
        "un": 1, "una": 1, "uno": 1, "dos": 2, "tres": 3, "cuatro": 4, "cinco": 5,
        "seis": 6, "siete": 7, "ocho": 8, "nueve": 9, "diez": 10, "once": 11, "doce": 12,
    },
    ordinals={
        "primer": 1, "primero": 1, "primera": 1,
        "segundo": 2, "segunda": 2,
        "tercer": 3, "tercero": 3, "tercera": 3,
        "cuarto": 4, "cuarta": 4,
        "quinto": 5, "quinta": 5,
        "último": -1, "ultimo": -1, "última": -1, "ultima": -1,
    },
    weekday_names={**WEEKDAYS, **WEEKDAY_PLURALS},
    urgent_keywords=("urgente", "asap", "cuanto antes"),
    date_prepositions=("el",),
    time_connectors=("a las", "a la", "sobre las", "hacia las", "desde las"),
    list_conjunctions=("y", "e"),
)
