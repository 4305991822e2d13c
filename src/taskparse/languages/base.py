"""Language configuration types shared by all keyword tables.

A ``LanguageConfig`` bundles every language-specific table the extractors
need: deadline keywords, relative date phrases, recurrence phrases, time
and date patterns, plus the small word lists used to absorb connectors.
Tables are normalised and their regular expressions compiled once, at
construction; afterwards a config is read-only and safe to share between
threads.

Patterns may reference the tables through placeholders that expand to a
longest-first alternation:

    {months}        month_names keys
    {weekdays}      weekday_names keys
    {ordinals}      ordinals keys
    {units}         frequency_units keys
    {numbers}       number_words keys
    {offset_units}  offset_units keys
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Pattern, Tuple

from ..dates import MODIFIER_NAMES, DaysOffset, NextWeekday, RelativeDateModifier
from ..models import Frequency, RecurringPattern, Weekday


TYPOGRAPHIC_APOSTROPHE = "’"

# A keyword must not continue a word or a #tag/@project token.
KEYWORD_START = r"(?<![\w#@])"
KEYWORD_END = r"(?!\w)"

# How far back to look for a keyword directly in front of a match.
PREFIX_WINDOW = 48


class LanguageConfigError(ValueError):
    """Raised when a language table is malformed."""


@dataclass(frozen=True)
class RecurringKeyword:
    """Recurrence template attached to a keyword phrase."""
    frequency: Frequency
    interval: Optional[int] = None
    weekday: Optional[Weekday] = None
    day_of_month: Optional[int] = None
    week_of_month: Optional[int] = None

    def to_pattern(self) -> RecurringPattern:
        days = (self.weekday,) if self.weekday is not None else None
        return RecurringPattern(
            frequency=self.frequency,
            interval=self.interval or 1,
            days_of_week=days,
            day_of_month=self.day_of_month,
            week_of_month=self.week_of_month,
        )


def normalize_phrase(phrase: str) -> str:
    """Lower-case a phrase and collapse its whitespace."""
    return " ".join(phrase.lower().split())


def phrase_alternation(phrases: Iterable[str]) -> str:
    """Build a regex alternation, longest phrase first.

    Internal whitespace matches any run of whitespace.
    """
    ordered = sorted(set(phrases), key=lambda p: (-len(p), p))
    return "|".join(r"\s+".join(re.escape(word) for word in p.split()) for p in ordered)


def keyword_regex(phrases: Iterable[str]) -> Optional[Pattern]:
    """Compile a case-insensitive whole-word matcher for ``phrases``."""
    alternation = phrase_alternation(phrases)
    if not alternation:
        return None
    return re.compile(f"{KEYWORD_START}(?:{alternation}){KEYWORD_END}", re.IGNORECASE)


def prefix_regex(phrases: Iterable[str]) -> Optional[Pattern]:
    """Compile a matcher for a keyword that ends right before a position.

    Use with ``pattern.search(text, pos - PREFIX_WINDOW, pos)``.
    """
    alternation = phrase_alternation(phrases)
    if not alternation:
        return None
    return re.compile(f"{KEYWORD_START}(?:{alternation})\\s+$", re.IGNORECASE)


# Building blocks shared by the built-in tables.
DAY_OF_MONTH = r"(?P<day>3[01]|[12]\d|0?[1-9])"
ISO_DATE = r"(?<![\w/.-])(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})(?![\w/-]|\.\d)"
CLOCK_TIME = r"(?<![\w:.])(?P<hour>[01]?\d|2[0-3]):(?P<minute>[0-5]\d)(?![\w:]|\.\d)"
MERIDIEM_TIME = (
    r"(?<![\w:.])(?P<hour>1[0-2]|0?[1-9])(?::(?P<minute>[0-5]\d))?\s*(?P<meridiem>[ap])\.?m\.?(?!\w)"
)


def bounded(pattern: str) -> str:
    """Wrap a pattern in the keyword word boundaries."""
    return KEYWORD_START + "(?:" + pattern + ")" + KEYWORD_END


def slash_date(order: str) -> str:
    """Numeric ``a/b[/year]`` date; ``order`` is ``"dm"`` or ``"md"``."""
    first, second = ("day", "month") if order == "dm" else ("month", "day")
    return (
        rf"(?<![\w/.])(?P<{first}>\d{{1,2}})/(?P<{second}>\d{{1,2}})"
        r"(?:/(?P<year>\d{4}|\d{2}))?(?![\w/]|\.\d)"
    )


def weekly_keywords(prefixes: Iterable[str],
                    weekdays: Mapping[str, Weekday]) -> Dict[str, RecurringKeyword]:
    """``every monday`` style entries for every prefix/weekday pair.

    An empty prefix registers the bare weekday name.
    """
    return {
        f"{prefix} {name}".strip(): RecurringKeyword(Frequency.WEEKLY, interval=1, weekday=weekday)
        for prefix in prefixes
        for name, weekday in weekdays.items()
    }


def next_weekday_phrases(templates: Iterable[str],
                         weekdays: Mapping[str, Weekday]) -> Dict[str, NextWeekday]:
    """Relative date entries from templates such as ``"next {}"``."""
    return {
        template.format(name): NextWeekday(weekday)
        for template in templates
        for name, weekday in weekdays.items()
    }


def _with_apostrophes(phrases: Iterable[str]) -> List[str]:
    result = []
    for phrase in phrases:
        phrase = normalize_phrase(phrase)
        result.append(phrase)
        if "'" in phrase:
            result.append(phrase.replace("'", TYPOGRAPHIC_APOSTROPHE))
    return list(dict.fromkeys(result))


def _normalize_mapping(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    normalized = {}
    for key, value in mapping.items():
        for variant in _with_apostrophes([key]):
            normalized[variant] = value
    return MappingProxyType(normalized)


@dataclass(frozen=True, eq=False, repr=False)
class LanguageConfig:
    """Keyword tables and patterns for one language."""

    code: str
    name: str = ""

    # Core tables
    deadline_keywords: Tuple[str, ...] = ()
    relative_dates: Mapping[str, RelativeDateModifier] = field(default_factory=dict)
    recurring_keywords: Mapping[str, RecurringKeyword] = field(default_factory=dict)
    time_patterns: Tuple[str, ...] = ()

    # Absolute and offset dates
    date_patterns: Tuple[str, ...] = ()
    month_names: Mapping[str, int] = field(default_factory=dict)
    offset_patterns: Tuple[str, ...] = ()
    offset_units: Mapping[str, int] = field(default_factory=dict)

    # Open-ended recurrence phrases
    recurring_patterns: Tuple[str, ...] = ()
    frequency_units: Mapping[str, Frequency] = field(default_factory=dict)
    number_words: Mapping[str, int] = field(default_factory=dict)
    ordinals: Mapping[str, int] = field(default_factory=dict)
    weekday_names: Mapping[str, Weekday] = field(default_factory=dict)
    # Matched alone but never as part of a weekday list ("monday and sat down")
    weekday_abbreviations: Mapping[str, Weekday] = field(default_factory=dict)

    # Small word lists
    urgent_keywords: Tuple[str, ...] = ()
    date_prepositions: Tuple[str, ...] = ()
    time_connectors: Tuple[str, ...] = ()
    list_conjunctions: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ("deadline_keywords", "urgent_keywords", "date_prepositions",
                     "time_connectors", "list_conjunctions"):
            object.__setattr__(self, name, tuple(_with_apostrophes(getattr(self, name))))
        for name in ("relative_dates", "recurring_keywords", "month_names", "offset_units",
                     "frequency_units", "number_words", "ordinals", "weekday_names",
                     "weekday_abbreviations"):
            object.__setattr__(self, name, _normalize_mapping(getattr(self, name)))
        for name in ("time_patterns", "date_patterns", "offset_patterns", "recurring_patterns"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        self._compile()

    def __repr__(self) -> str:
        return f"LanguageConfig(code={self.code!r}, name={self.name!r})"

    def _set(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    def _expand(self, pattern: str) -> str:
        placeholders = {
            "{months}": self.month_names,
            "{weekdays}": {**self.weekday_names, **self.weekday_abbreviations},
            "{ordinals}": self.ordinals,
            "{units}": self.frequency_units,
            "{numbers}": self.number_words,
            "{offset_units}": self.offset_units,
        }
        for placeholder, table in placeholders.items():
            if placeholder in pattern:
                # An empty table must not turn into an always-matching group.
                alternation = phrase_alternation(table) or "(?!)"
                pattern = pattern.replace(placeholder, f"(?:{alternation})")
        return pattern

    def _compile_all(self, patterns: Tuple[str, ...]) -> Tuple[Pattern, ...]:
        compiled = []
        for source in patterns:
            try:
                compiled.append(re.compile(self._expand(source), re.IGNORECASE))
            except re.error as e:
                raise LanguageConfigError(
                    f"Invalid pattern in language '{self.code}': {source!r}: {e}"
                ) from e
        return tuple(compiled)

    def _compile(self) -> None:
        self._set("relative_date_regex", keyword_regex(self.relative_dates))
        self._set("recurring_keyword_regex", keyword_regex(self.recurring_keywords))
        self._set("urgent_regex", keyword_regex(self.urgent_keywords))
        self._set("deadline_prefix_regex", prefix_regex(self.deadline_keywords))
        self._set("preposition_prefix_regex", prefix_regex(self.date_prepositions))
        self._set("connector_prefix_regex", prefix_regex(self.time_connectors))
        self._set("time_regexes", self._compile_all(self.time_patterns))
        self._set("date_regexes", self._compile_all(self.date_patterns))
        self._set("offset_regexes", self._compile_all(self.offset_patterns))
        self._set("recurring_regexes", self._compile_all(self.recurring_patterns))

        weekday_list = None
        if self.weekday_names:
            separator = r"\s*,\s*"
            if self.list_conjunctions:
                conjunctions = phrase_alternation(self.list_conjunctions)
                separator = rf"(?:\s*,\s*(?:(?:{conjunctions})\s+)?|\s+(?:{conjunctions})\s+)"
            weekday_list = re.compile(
                separator + r"(?P<weekday>" + phrase_alternation(self.weekday_names) + ")" + KEYWORD_END,
                re.IGNORECASE,
            )
        self._set("weekday_list_regex", weekday_list)

    # -- Lookups -----------------------------------------------------------

    def relative_date(self, phrase: str) -> Optional[RelativeDateModifier]:
        return self.relative_dates.get(normalize_phrase(phrase))

    def recurring_keyword(self, phrase: str) -> Optional[RecurringKeyword]:
        return self.recurring_keywords.get(normalize_phrase(phrase))

    def month(self, text: str) -> Optional[int]:
        """Month number for a numeric literal or a month name."""
        text = normalize_phrase(text).rstrip(".")
        if text.isdigit():
            month = int(text)
            return month if 1 <= month <= 12 else None
        return self.month_names.get(text)

    def weekday(self, name: str) -> Optional[Weekday]:
        name = normalize_phrase(name)
        if name in self.weekday_names:
            return self.weekday_names[name]
        return self.weekday_abbreviations.get(name)

    def number(self, text: str) -> Optional[int]:
        """Value of a digit string or a number word ("3", "three", "other")."""
        text = normalize_phrase(text)
        if text.isdigit():
            return int(text)
        return self.number_words.get(text)

    # -- Construction from plain data --------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any],
                  base: Optional["LanguageConfig"] = None) -> "LanguageConfig":
        """Build a table from plain data, e.g. loaded from YAML.

        Args:
            data: Mapping with the field names of this class
            base: Optional table to extend; mappings are merged, lists replaced

        Returns:
            The new language configuration

        Raises:
            LanguageConfigError: If the data is malformed
        """
        if not isinstance(data, Mapping):
            raise LanguageConfigError("Language table must be a mapping")

        unknown = set(data) - set(cls.__dataclass_fields__) - {"extends"}
        if unknown:
            raise LanguageConfigError(f"Unknown language table fields: {', '.join(sorted(unknown))}")

        values: Dict[str, Any] = {}
        if base is not None:
            values = {name: getattr(base, name) for name in cls.__dataclass_fields__}

        for name, raw in data.items():
            if name == "extends":
                continue
            if name in ("code", "name"):
                values[name] = str(raw)
                continue
            if name == "relative_dates":
                parsed = {str(k): _parse_modifier(v) for k, v in _mapping(name, raw).items()}
            elif name == "recurring_keywords":
                parsed = {str(k): _parse_recurring(v) for k, v in _mapping(name, raw).items()}
            elif name == "frequency_units":
                parsed = {str(k): _parse_frequency(v) for k, v in _mapping(name, raw).items()}
            elif name in ("weekday_names", "weekday_abbreviations"):
                parsed = {str(k): _parse_weekday(v) for k, v in _mapping(name, raw).items()}
            elif name in ("month_names", "offset_units", "number_words", "ordinals"):
                parsed = {str(k): _parse_int(name, v) for k, v in _mapping(name, raw).items()}
            else:
                if not isinstance(raw, (list, tuple)):
                    raise LanguageConfigError(f"'{name}' must be a list")
                values[name] = tuple(str(item) for item in raw)
                continue
            # Mappings extend the base table; lists replace it.
            values[name] = {**values.get(name, {}), **parsed}

        if "code" not in values:
            raise LanguageConfigError("Language table needs a 'code'")
        return cls(**values)


def _mapping(name: str, raw: Any) -> Mapping:
    if not isinstance(raw, Mapping):
        raise LanguageConfigError(f"'{name}' must be a mapping")
    return raw


def _parse_int(name: str, raw: Any) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise LanguageConfigError(f"'{name}' values must be integers, got {raw!r}") from e


def _parse_weekday(raw: Any) -> Weekday:
    try:
        return Weekday[str(raw).upper()]
    except KeyError as e:
        raise LanguageConfigError(f"Unknown weekday: {raw!r}") from e


def _parse_frequency(raw: Any) -> Frequency:
    try:
        return Frequency(str(raw).lower())
    except ValueError as e:
        raise LanguageConfigError(f"Unknown frequency: {raw!r}") from e


def _parse_modifier(raw: Any) -> RelativeDateModifier:
    """Parse ``today`` / ``{next_weekday: monday}`` / ``{days_offset: 3}``."""
    if isinstance(raw, str):
        modifier_type = MODIFIER_NAMES.get(raw.lower())
        if modifier_type is None or modifier_type in (NextWeekday, DaysOffset):
            raise LanguageConfigError(f"Unknown relative date modifier: {raw!r}")
        return modifier_type()

    if isinstance(raw, Mapping) and len(raw) == 1:
        (kind, argument), = raw.items()
        if kind == "next_weekday":
            return NextWeekday(_parse_weekday(argument))
        if kind == "days_offset":
            return DaysOffset(_parse_int(kind, argument))

    raise LanguageConfigError(f"Unknown relative date modifier: {raw!r}")


def _parse_recurring(raw: Any) -> RecurringKeyword:
    if isinstance(raw, str):
        return RecurringKeyword(_parse_frequency(raw))
    if not isinstance(raw, Mapping) or "frequency" not in raw:
        raise LanguageConfigError(f"Recurring keyword needs a frequency: {raw!r}")

    keyword = RecurringKeyword(
        frequency=_parse_frequency(raw["frequency"]),
        interval=_parse_int("interval", raw["interval"]) if "interval" in raw else None,
        weekday=_parse_weekday(raw["weekday"]) if "weekday" in raw else None,
        day_of_month=_parse_int("day_of_month", raw["day_of_month"]) if "day_of_month" in raw else None,
        week_of_month=_parse_int("week_of_month", raw["week_of_month"]) if "week_of_month" in raw else None,
    )
    try:
        keyword.to_pattern()
    except ValueError as e:
        raise LanguageConfigError(f"Invalid recurring keyword {raw!r}: {e}") from e
    return keyword
