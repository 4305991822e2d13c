"""
Recurrence extraction for taskparse

This module turns recurrence phrases ("daily", "every Monday and Friday",
"first Monday of the month", "alle 2 Wochen") into a single
RecurringPattern per input, using the keyword table and the open-ended
recurrence patterns of a language.
"""

import logging
from dataclasses import dataclass
from typing import List, Match, Optional, Tuple

from .languages.base import LanguageConfig, normalize_phrase
from .models import AnnotationType, Frequency, RecurringPattern, Weekday
from .spans import Candidate, SpanTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecurrenceMatch:
    """A recognised recurrence phrase before merging."""
    pattern: RecurringPattern
    # Weekday-qualified phrases may continue with a weekday list.
    takes_weekday_list: bool = False


def can_merge(current: RecurringPattern, new: RecurringPattern) -> bool:
    """Weekly patterns with the same interval merge their weekday sets."""
    return (
        current.frequency is Frequency.WEEKLY
        and new.frequency is Frequency.WEEKLY
        and current.interval == new.interval
        and current.day_of_month is None and new.day_of_month is None
        and current.week_of_month is None and new.week_of_month is None
    )


class RecurrenceExtractor:
    """Finds recurrence phrases and merges them into one pattern."""

    def __init__(self, language: LanguageConfig):
        self.language = language

    def candidates(self, tracker: SpanTracker) -> List[Candidate]:
        found: List[Candidate] = []

        for match in tracker.finditer(self.language.recurring_keyword_regex):
            keyword = self.language.recurring_keyword(match.group(0))
            if keyword is None:
                continue
            weekday_qualified = keyword.weekday is not None and keyword.week_of_month is None
            found.append(Candidate(match.start(), match.end(), 0,
                                   RecurrenceMatch(keyword.to_pattern(), weekday_qualified), match))

        for order, pattern in enumerate(self.language.recurring_regexes, start=1):
            for match in tracker.finditer(pattern):
                recurrence = self.from_match(match)
                if recurrence is not None:
                    found.append(Candidate(match.start(), match.end(), order, recurrence, match))

        return found

    def from_match(self, match: Match) -> Optional[RecurrenceMatch]:
        """Expand a recurrence pattern match by its named groups.

        ``interval`` + ``unit``      every 3 days
        ``interval`` + ``weekday``   every other Monday
        ``ordinal`` + ``weekday``    first Monday of the month
        ``day``                      every 15th
        """
        groups = {name: value for name, value in match.groupdict().items() if value}
        language = self.language
        try:
            if "interval" in groups and "unit" in groups:
                interval = language.number(groups["interval"])
                frequency = language.frequency_units.get(normalize_phrase(groups["unit"]))
                if not interval or frequency is None:
                    return None
                return RecurrenceMatch(RecurringPattern(frequency, interval=interval))

            if "weekday" in groups:
                weekday = language.weekday(groups["weekday"])
                if weekday is None:
                    return None
                if "interval" in groups:
                    interval = language.number(groups["interval"])
                    if not interval:
                        return None
                    return RecurrenceMatch(RecurringPattern.weekly([weekday], interval=interval), True)
                if "ordinal" in groups:
                    position = language.ordinals.get(normalize_phrase(groups["ordinal"]))
                    if position is None:
                        return None
                    return RecurrenceMatch(RecurringPattern.monthly_on_weekday(weekday, position))
                return RecurrenceMatch(RecurringPattern.weekly([weekday]), True)

            if "day" in groups:
                return RecurrenceMatch(RecurringPattern.monthly_on_day(int(groups["day"])))
        except ValueError as e:
            logger.debug(f"Rejected recurrence {match.group(0)!r}: {e}")
        return None

    def _weekday_list(self, tracker: SpanTracker, pos: int) -> Tuple[List[Weekday], int]:
        """Collect a ", Wednesday and Friday" continuation starting at ``pos``."""
        days: List[Weekday] = []
        regex = self.language.weekday_list_regex
        while regex is not None:
            match = regex.match(tracker.text, pos)
            if not match or not tracker.is_free(match.start(), match.end()):
                break
            days.append(self.language.weekday(match.group("weekday")))
            pos = match.end()
        return days, pos

    def extract(self, tracker: SpanTracker) -> Optional[RecurringPattern]:
        """Claim every recurrence phrase and return the merged pattern."""
        result: Optional[RecurringPattern] = None
        for candidate in tracker.select(self.candidates(tracker)):
            if not tracker.is_free(candidate.start, candidate.end):
                # Already absorbed by a weekday list.
                continue
            recurrence: RecurrenceMatch = candidate.value
            pattern, end = recurrence.pattern, candidate.end
            if recurrence.takes_weekday_list:
                days, end = self._weekday_list(tracker, end)
                if days:
                    pattern = pattern.with_days(days)

            tracker.claim(AnnotationType.RECURRENCE, candidate.start, end)
            logger.debug(f"Recurrence {pattern.describe()} from {tracker.text[candidate.start:end]!r}")

            if result is None:
                result = pattern
            elif can_merge(result, pattern):
                result = result.with_days(pattern.days_of_week or ())
            else:
                logger.debug(f"Conflicting recurrence: {result.describe()} replaced by {pattern.describe()}")
                result = pattern
        return result

    def parse(self, phrase: str) -> Optional[RecurringPattern]:
        """Parse a standalone recurrence phrase, e.g. ``"every 2 weeks"``."""
        return self.extract(SpanTracker(phrase))
