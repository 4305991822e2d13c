"""Per-language keyword tables and the language registry.

Built-in tables are module-level constants; custom tables can be loaded
from YAML files and may ``extends`` a built-in table.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from .base import LanguageConfig, LanguageConfigError, RecurringKeyword
from .english import ENGLISH
from .french import FRENCH
from .german import GERMAN
from .spanish import SPANISH

logger = logging.getLogger(__name__)


LANGUAGES: Dict[str, LanguageConfig] = {
    "de": GERMAN,
    "en": ENGLISH,
    "fr": FRENCH,
    "es": SPANISH,
}

ALIASES: Dict[str, str] = {
    "german": "de",
    "deutsch": "de",
    "english": "en",
    "french": "fr",
    "français": "fr",
    "francais": "fr",
    "spanish": "es",
    "español": "es",
    "espanol": "es",
}


def get_language(code: str) -> Optional[LanguageConfig]:
    """Look up a built-in table by code or language name.

    Args:
        code: Language code ("de") or name ("Deutsch"), case-insensitive

    Returns:
        The table, or None if the language is unknown
    """
    if not code:
        return None
    key = code.strip().lower()
    return LANGUAGES.get(ALIASES.get(key, key))


def load_language_file(path: Union[str, Path]) -> LanguageConfig:
    """Load a custom language table from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        The language configuration

    Raises:
        LanguageConfigError: If the file cannot be read or is malformed
    """
    path = Path(path).expanduser()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise LanguageConfigError(f"Cannot read language table {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LanguageConfigError(f"Invalid YAML in language table {path}: {e}") from e

    if not isinstance(data, dict):
        raise LanguageConfigError(f"Language table {path} must be a mapping")

    base = None
    if data.get("extends") is not None:
        base = get_language(str(data["extends"]))
        if base is None:
            raise LanguageConfigError(f"Unknown base language: {data['extends']!r}")

    config = LanguageConfig.from_dict(data, base=base)
    logger.info(f"Loaded language table '{config.code}' from {path}")
    return config


__all__ = [
    "ALIASES",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "LANGUAGES",
    "LanguageConfig",
    "LanguageConfigError",
    "RecurringKeyword",
    "SPANISH",
    "get_language",
    "load_language_file",
]
