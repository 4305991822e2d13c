"""Extractors for priority, tags, time of day and dates.

Every extractor works on a ``SpanTracker``: it only looks at unclaimed
text and claims what it recognises. None of them raise on user input; a
phrase that cannot be interpreted is simply not a match.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, time
from typing import List, Match, Optional, Tuple

from .dates import DaysOffset, resolve_relative_date
from .languages.base import LanguageConfig, normalize_phrase
from .models import AnnotationType, Priority
from .spans import Candidate, SpanTracker
from .utils.datetime import make_date

logger = logging.getLogger(__name__)


# Standalone run of 1-3 marks: "!!" but not "!!!!" or "done!"
EXCLAMATION_PATTERN = re.compile(r"(?<!\S)!{1,3}(?!\S)")
P_TOKEN_PATTERN = re.compile(r"(?<!\S)[pP](?P<level>[1-4])(?!\S)")
# Sigil must start a word, so e-mail addresses are not projects.
TAG_PATTERN = re.compile(r"(?<!\S)(?P<sigil>[#@])(?P<name>[^\s#@]+)")

EXCLAMATION_LEVELS = {1: Priority.LOW, 2: Priority.MEDIUM, 3: Priority.HIGH}
P_TOKEN_LEVELS = {"1": Priority.HIGH, "2": Priority.MEDIUM, "3": Priority.LOW, "4": Priority.LOW}


class PriorityExtractor:
    """Exclamation marks, p1-p4 tokens and urgent keywords."""

    def __init__(self, language: LanguageConfig):
        self.language = language

    def extract(self, tracker: SpanTracker) -> Optional[Priority]:
        forms = (
            (EXCLAMATION_PATTERN, lambda m: EXCLAMATION_LEVELS[len(m.group(0))]),
            (P_TOKEN_PATTERN, lambda m: P_TOKEN_LEVELS[m.group("level")]),
            (self.language.urgent_regex, lambda m: Priority.HIGH),
        )
        for pattern, level in forms:
            for match in tracker.finditer(pattern):
                tracker.claim(AnnotationType.PRIORITY, match.start(), match.end())
                return level(match)
        return None


class TagExtractor:
    """``#label`` and ``@project`` tokens; they stay in the title."""

    def extract(self, tracker: SpanTracker) -> Tuple[List[str], Optional[str]]:
        labels: List[str] = []
        project = None
        for match in tracker.finditer(TAG_PATTERN):
            if match.group("sigil") == "#":
                tracker.claim(AnnotationType.TAG, match.start(), match.end(), remove=False)
                labels.append(match.group("name"))
            else:
                tracker.claim(AnnotationType.PROJECT, match.start(), match.end(), remove=False)
                project = match.group("name")
        return labels, project


@dataclass(frozen=True)
class ExtractedTime:
    """A time of day and whether a deadline keyword introduced it."""
    value: time
    deadline: bool = False


def time_from_match(match: Match) -> Optional[time]:
    """Convert a time pattern match to a 24-hour time.

    Returns None if the hour or minute is out of range.
    """
    groups = match.groupdict()
    try:
        hour = int(groups["hour"])
        minute = int(groups.get("minute") or 0)
    except (KeyError, TypeError, ValueError):
        return None

    meridiem = (groups.get("meridiem") or "").lower()
    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if meridiem == "p" else 0)

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return time(hour, minute)


class TimeExtractor:
    """Time of day, with its connector and deadline keyword."""

    def __init__(self, language: LanguageConfig):
        self.language = language

    def extract(self, tracker: SpanTracker) -> Optional[ExtractedTime]:
        for pattern in self.language.time_regexes:
            for match in tracker.finditer(pattern):
                value = time_from_match(match)
                if value is None:
                    logger.debug(f"Ignoring out-of-range time {match.group(0)!r}")
                    continue

                start = match.start()
                connector = tracker.prefix(self.language.connector_prefix_regex, start)
                if connector:
                    start = connector.start()
                keyword = tracker.prefix(self.language.deadline_prefix_regex, start)
                if keyword:
                    start = keyword.start()

                tracker.claim(AnnotationType.TIME, start, match.end())
                return ExtractedTime(value, deadline=keyword is not None)
        return None


class DateExtractor:
    """Relative keywords, absolute dates and offsets.

    A candidate directly preceded by a deadline keyword becomes the
    deadline, any other candidate the scheduled date. The first of each
    kind wins; later candidates stay in the title.
    """

    def __init__(self, language: LanguageConfig):
        self.language = language

    def candidates(self, tracker: SpanTracker, reference: date) -> List[Candidate]:
        language = self.language
        found: List[Candidate] = []
        order = 0

        for match in tracker.finditer(language.relative_date_regex):
            modifier = language.relative_date(match.group(0))
            if modifier is not None:
                found.append(Candidate(match.start(), match.end(), order,
                                       resolve_relative_date(modifier, reference), match))

        for pattern in language.date_regexes:
            order += 1
            for match in tracker.finditer(pattern):
                value = self._absolute(match, reference)
                if value is not None:
                    found.append(Candidate(match.start(), match.end(), order, value, match))

        for pattern in language.offset_regexes:
            order += 1
            for match in tracker.finditer(pattern):
                value = self._offset(match, reference)
                if value is not None:
                    found.append(Candidate(match.start(), match.end(), order, value, match))

        return found

    def extract(self, tracker: SpanTracker, reference: date) -> Tuple[Optional[date], Optional[date]]:
        """Claim the scheduled date and the deadline.

        Returns:
            ``(scheduled_date, deadline)``
        """
        scheduled = deadline = None
        for candidate in tracker.select(self.candidates(tracker, reference)):
            keyword = tracker.prefix(self.language.deadline_prefix_regex, candidate.start)
            if keyword:
                if deadline is not None:
                    continue
                deadline = candidate.value
                tracker.claim(AnnotationType.DATE, keyword.start(), candidate.end)
                logger.debug(f"Deadline {deadline} from {tracker.text[keyword.start():candidate.end]!r}")
            else:
                if scheduled is not None:
                    continue
                start = candidate.start
                preposition = tracker.prefix(self.language.preposition_prefix_regex, start)
                if preposition:
                    start = preposition.start()
                scheduled = candidate.value
                tracker.claim(AnnotationType.DATE, start, candidate.end)
                logger.debug(f"Scheduled date {scheduled} from {tracker.text[start:candidate.end]!r}")
        return scheduled, deadline

    def _absolute(self, match: Match, reference: date) -> Optional[date]:
        groups = match.groupdict()
        if not groups.get("day") or not groups.get("month"):
            return None
        month = self.language.month(groups["month"])
        if month is None:
            return None
        year = int(groups["year"]) if groups.get("year") else None
        return make_date(int(groups["day"]), month, year, reference)

    def _offset(self, match: Match, reference: date) -> Optional[date]:
        groups = match.groupdict()
        count = self.language.number(groups.get("count") or "")
        unit_days = self.language.offset_units.get(normalize_phrase(groups.get("unit") or ""))
        if count is None or unit_days is None:
            return None
        return resolve_relative_date(DaysOffset(count * unit_days), reference)
