"""Natural language task parser.

Extraction runs in a fixed order over one input string: priority, tags and
project, recurrence, time, date. Each step claims the spans it recognises,
so later steps never see text an earlier step consumed. What is left
(minus removed spans) becomes the title.
"""

import logging
from datetime import date
from typing import Optional, Union

from .extractors import DateExtractor, PriorityExtractor, TagExtractor, TimeExtractor
from .languages import LanguageConfig, get_language
from .models import ParsedTask, TimeTarget
from .recurring import RecurrenceExtractor
from .spans import SpanTracker
from .utils.datetime import DateLike, as_date

logger = logging.getLogger(__name__)


class TaskParser:
    """Parses free-form task text for one language."""

    def __init__(self, language: LanguageConfig):
        self.language = language
        self.priority_extractor = PriorityExtractor(language)
        self.tag_extractor = TagExtractor()
        self.recurrence_extractor = RecurrenceExtractor(language)
        self.time_extractor = TimeExtractor(language)
        self.date_extractor = DateExtractor(language)

    def parse(self, text: str, reference_date: Optional[DateLike] = None) -> ParsedTask:
        """Parse task text into structured data.

        Args:
            text: The raw task text
            reference_date: The date treated as "today" (default: local today)

        Returns:
            The parsed task. Never raises on user input; if extraction fails
            unexpectedly, a task with only the title is returned.
        """
        reference = as_date(reference_date)
        try:
            return self._parse(text, reference)
        except Exception:
            logger.exception(f"Parsing failed for {text!r}")
            return ParsedTask(original_input=text, title=" ".join(text.split()))

    def _parse(self, text: str, reference: date) -> ParsedTask:
        tracker = SpanTracker(text)

        priority = self.priority_extractor.extract(tracker)
        if priority is not None:
            logger.debug(f"Priority: {priority.name}")

        labels, project = self.tag_extractor.extract(tracker)
        if labels or project:
            logger.debug(f"Labels: {labels}, project: {project}")

        recurring = self.recurrence_extractor.extract(tracker)
        extracted_time = self.time_extractor.extract(tracker)
        if extracted_time is not None:
            logger.debug(f"Time: {extracted_time.value} (deadline keyword: {extracted_time.deadline})")

        scheduled_date, deadline = self.date_extractor.extract(tracker, reference)

        time_target = TimeTarget.SCHEDULED
        if extracted_time is not None and (extracted_time.deadline or deadline is not None):
            time_target = TimeTarget.DEADLINE
            if deadline is None:
                # "Montag bis 14 Uhr": the deadline is on the scheduled day.
                deadline = scheduled_date or reference

        return ParsedTask(
            original_input=text,
            title=tracker.title(),
            scheduled_date=scheduled_date,
            deadline=deadline,
            time=extracted_time.value if extracted_time else None,
            time_target=time_target,
            priority=priority,
            project=project,
            labels=tuple(labels),
            recurring=recurring,
            annotations=tracker.annotations(),
        )


def parse_task(text: str, language: Union[str, LanguageConfig] = "en",
               reference_date: Optional[DateLike] = None) -> ParsedTask:
    """Parse task text with a built-in language or a custom table.

    Raises:
        ValueError: If ``language`` is an unknown language code
    """
    if isinstance(language, str):
        config = get_language(language)
        if config is None:
            raise ValueError(f"Unknown language: {language!r}")
        language = config
    return TaskParser(language).parse(text, reference_date)
