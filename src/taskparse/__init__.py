"""taskparse - deterministic natural language task parsing for de, en, fr and es."""

__version__ = "0.1.0"
__author__ = "taskparse contributors"

from .languages import LanguageConfig, LanguageConfigError, get_language, load_language_file
from .models import (
    Annotation,
    AnnotationType,
    Frequency,
    ParsedTask,
    Priority,
    RecurringPattern,
    TimeTarget,
    Weekday,
)
from .parser import TaskParser, parse_task

__all__ = [
    "Annotation",
    "AnnotationType",
    "Frequency",
    "LanguageConfig",
    "LanguageConfigError",
    "ParsedTask",
    "Priority",
    "RecurringPattern",
    "TaskParser",
    "TimeTarget",
    "Weekday",
    "get_language",
    "load_language_file",
    "parse_task",
    "__version__",
]
