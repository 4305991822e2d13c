"""Output data model for parsed tasks."""

from dataclasses import dataclass, field
from datetime import date, datetime, time as dt_time
from enum import Enum, IntEnum
from typing import Any, Dict, Iterable, Optional, Tuple

from .utils.datetime import combine, to_iso_string


class Priority(IntEnum):
    """Task priority levels, ordered from lowest to highest."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3


class Weekday(IntEnum):
    """Days of the week, numbered like ``date.weekday()``."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def rrule_code(self) -> str:
        """Two-letter RFC 5545 day code (MO, TU, ...)."""
        return self.name[:2]


class Frequency(Enum):
    """Base frequency of a recurrence."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class RecurringPattern:
    """A recurrence rule extracted from task text.

    Examples:
        daily                 -> RecurringPattern(Frequency.DAILY)
        every 3 days          -> RecurringPattern(Frequency.DAILY, interval=3)
        every Monday, Friday  -> RecurringPattern(Frequency.WEEKLY, days_of_week=(MONDAY, FRIDAY))
        first Monday of month -> RecurringPattern(Frequency.MONTHLY, days_of_week=(MONDAY,), week_of_month=1)
        every 15th            -> RecurringPattern(Frequency.MONTHLY, day_of_month=15)
    """
    frequency: Frequency
    interval: int = 1
    days_of_week: Optional[Tuple[Weekday, ...]] = None
    day_of_month: Optional[int] = None  # 1-31, -1 = last day
    week_of_month: Optional[int] = None  # 1-5, -1 = last week

    def __post_init__(self):
        """Normalise and validate the pattern."""
        object.__setattr__(self, "interval", max(1, int(self.interval)))

        if self.days_of_week is not None:
            days = tuple(dict.fromkeys(Weekday(day) for day in self.days_of_week))
            object.__setattr__(self, "days_of_week", days or None)

        if self.day_of_month is not None and not (
            1 <= self.day_of_month <= 31 or self.day_of_month == -1
        ):
            raise ValueError(f"day_of_month out of range: {self.day_of_month}")

        if self.week_of_month is not None:
            if not (1 <= self.week_of_month <= 5 or self.week_of_month == -1):
                raise ValueError(f"week_of_month out of range: {self.week_of_month}")
            if self.frequency is not Frequency.MONTHLY:
                raise ValueError("week_of_month requires a monthly frequency")
            if not self.days_of_week or len(self.days_of_week) != 1:
                raise ValueError("week_of_month requires exactly one weekday")

    @classmethod
    def daily(cls, interval: int = 1) -> "RecurringPattern":
        return cls(Frequency.DAILY, interval=interval)

    @classmethod
    def weekly(cls, days_of_week: Iterable[Weekday] = (), interval: int = 1) -> "RecurringPattern":
        return cls(Frequency.WEEKLY, interval=interval, days_of_week=tuple(days_of_week) or None)

    @classmethod
    def monthly_on_day(cls, day_of_month: int, interval: int = 1) -> "RecurringPattern":
        return cls(Frequency.MONTHLY, interval=interval, day_of_month=day_of_month)

    @classmethod
    def monthly_on_weekday(cls, weekday: Weekday, week_of_month: int,
                           interval: int = 1) -> "RecurringPattern":
        return cls(Frequency.MONTHLY, interval=interval, days_of_week=(weekday,),
                   week_of_month=week_of_month)

    @classmethod
    def yearly(cls, interval: int = 1) -> "RecurringPattern":
        return cls(Frequency.YEARLY, interval=interval)

    def with_days(self, days: Iterable[Weekday]) -> "RecurringPattern":
        """Return a copy with ``days`` appended to the weekday set."""
        merged = tuple(self.days_of_week or ()) + tuple(days)
        return RecurringPattern(self.frequency, self.interval, merged,
                                self.day_of_month, self.week_of_month)

    def describe(self) -> str:
        """Human-readable summary, e.g. ``weekly on monday, friday``."""
        parts = [self.frequency.value]
        if self.interval > 1:
            parts.append(f"(every {self.interval})")
        if self.days_of_week:
            parts.append("on " + ", ".join(day.name.lower() for day in self.days_of_week))
        if self.day_of_month is not None:
            parts.append("on the last day" if self.day_of_month == -1 else f"on day {self.day_of_month}")
        if self.week_of_month is not None:
            position = "last" if self.week_of_month == -1 else f"{self.week_of_month}."
            parts.append(f"({position} week)")
        return " ".join(parts)

    def to_rrule(self) -> str:
        """Render the pattern as an RFC 5545 RRULE value."""
        rule = [f"FREQ={self.frequency.name}", f"INTERVAL={self.interval}"]
        if self.days_of_week:
            prefix = str(self.week_of_month) if self.week_of_month is not None else ""
            rule.append("BYDAY=" + ",".join(prefix + day.rrule_code for day in self.days_of_week))
        if self.day_of_month is not None:
            rule.append(f"BYMONTHDAY={self.day_of_month}")
        return ";".join(rule)


class AnnotationType(Enum):
    """Kind of span recognised in the input."""
    DATE = "date"
    TIME = "time"
    PRIORITY = "priority"
    TAG = "tag"
    PROJECT = "project"
    RECURRENCE = "recurrence"

    @property
    def kept_in_title(self) -> bool:
        """Tags and projects stay verbatim in the title."""
        return self in (AnnotationType.TAG, AnnotationType.PROJECT)


@dataclass(frozen=True)
class Annotation:
    """A recognised span of the original input, for UI highlighting."""
    type: AnnotationType
    start: int
    end: int
    text: str

    @property
    def range(self) -> Tuple[int, int]:
        return (self.start, self.end)

    def overlaps(self, other: "Annotation") -> bool:
        return self.start < other.end and other.start < self.end


class TimeTarget(Enum):
    """Which date an extracted time of day modifies."""
    SCHEDULED = "scheduled"
    DEADLINE = "deadline"


@dataclass(frozen=True)
class ParsedTask:
    """Structured result of parsing one line of task text."""
    original_input: str
    title: str
    scheduled_date: Optional[date] = None
    deadline: Optional[date] = None
    time: Optional[dt_time] = None
    time_target: TimeTarget = TimeTarget.SCHEDULED
    priority: Optional[Priority] = None
    project: Optional[str] = None
    labels: Tuple[str, ...] = ()
    recurring: Optional[RecurringPattern] = None
    annotations: Tuple[Annotation, ...] = field(default_factory=tuple)

    @property
    def scheduled_at(self) -> Optional[datetime]:
        """Scheduled date combined with the time, if the time belongs to it."""
        at = self.time if self.time_target is TimeTarget.SCHEDULED else None
        return combine(self.scheduled_date, at)

    @property
    def deadline_at(self) -> Optional[datetime]:
        """Deadline combined with the time, if the time belongs to it."""
        at = self.time if self.time_target is TimeTarget.DEADLINE else None
        return combine(self.deadline, at)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for serialisation."""
        return {
            "original_input": self.original_input,
            "title": self.title,
            "scheduled_date": to_iso_string(self.scheduled_date),
            "deadline": to_iso_string(self.deadline),
            "time": self.time.strftime("%H:%M") if self.time else None,
            "time_target": self.time_target.value if self.time else None,
            "priority": self.priority.name.lower() if self.priority else None,
            "project": self.project,
            "labels": list(self.labels),
            "recurring": self.recurring.to_rrule() if self.recurring else None,
            "annotations": [
                {"type": a.type.value, "start": a.start, "end": a.end, "text": a.text}
                for a in self.annotations
            ],
        }
