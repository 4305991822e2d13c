"""Tests for language tables and the language registry."""

from datetime import date

import pytest

from taskparse.dates import DaysOffset, NextWeekday, Tomorrow
from taskparse.languages import (
    ENGLISH,
    FRENCH,
    GERMAN,
    LANGUAGES,
    SPANISH,
    LanguageConfig,
    LanguageConfigError,
    get_language,
    load_language_file,
)
from taskparse.languages.base import keyword_regex, normalize_phrase, phrase_alternation
from taskparse.models import Frequency, Weekday
from taskparse.parser import TaskParser


REFERENCE = date(2026, 10, 19)


class TestRegistry:
    """Test get_language."""

    def test_builtin_codes(self):
        assert set(LANGUAGES) == {"de", "en", "fr", "es"}
        assert get_language("de") is GERMAN
        assert get_language("en") is ENGLISH
        assert get_language("fr") is FRENCH
        assert get_language("es") is SPANISH

    def test_case_insensitive_and_aliases(self):
        assert get_language("EN") is ENGLISH
        assert get_language(" Deutsch ") is GERMAN
        assert get_language("Français") is FRENCH
        assert get_language("espanol") is SPANISH

    def test_unknown(self):
        assert get_language("xx") is None
        assert get_language("") is None


class TestPhraseHelpers:

    def test_normalize_phrase(self):
        assert normalize_phrase("  Next   WEEK ") == "next week"

    def test_alternation_longest_first(self):
        alternation = phrase_alternation(["due", "due by"])
        assert alternation.index("due\\s+by") < alternation.index("|due")

    def test_keyword_regex_respects_word_boundaries(self):
        regex = keyword_regex(["today"])
        assert regex.search("do it TODAY")
        assert not regex.search("todays")
        assert not regex.search("#today")

    def test_empty_keyword_list(self):
        assert keyword_regex([]) is None


class TestBuiltinTables:
    """Lookups on the built-in tables."""

    def test_lookups_ignore_case_and_whitespace(self):
        assert ENGLISH.relative_date("Day  After Tomorrow") is not None
        assert GERMAN.weekday("MONTAG") is Weekday.MONDAY
        assert FRENCH.month("Octobre") == 10
        assert SPANISH.number("dos") == 2

    def test_numeric_month(self):
        assert ENGLISH.month("10") == 10
        assert ENGLISH.month("13") is None

    def test_typographic_apostrophe_variant(self):
        assert FRENCH.relative_date("aujourd'hui") == FRENCH.relative_date("aujourd’hui")
        assert FRENCH.relative_date("aujourd’hui") is not None

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ENGLISH.relative_dates["someday"] = Tomorrow()

    @pytest.mark.parametrize("language", [ENGLISH, GERMAN, FRENCH, SPANISH])
    def test_every_table_compiles(self, language):
        assert language.relative_date_regex is not None
        assert language.recurring_keyword_regex is not None
        assert language.deadline_prefix_regex is not None
        assert language.time_regexes
        assert language.date_regexes
        assert language.weekday_list_regex is not None

    def test_weekday_abbreviations(self):
        assert ENGLISH.weekday("Sat") is Weekday.SATURDAY
        assert ENGLISH.weekday("monday") is Weekday.MONDAY
        assert ENGLISH.weekday_list_regex.match(" and sat") is None
        assert ENGLISH.weekday_list_regex.match(" and saturday") is not None

    def test_weekday_abbreviations_from_data(self):
        language = LanguageConfig.from_dict({
            "code": "nl",
            "weekday_names": {"maandag": "monday", "vrijdag": "friday"},
            "weekday_abbreviations": {"vr": "friday"},
        })
        assert language.weekday("vr") is Weekday.FRIDAY
        assert language.weekday_list_regex.match(", vrijdag") is not None
        assert language.weekday_list_regex.match(", vr") is None


class TestFromDict:
    """Test building tables from plain data."""

    def test_minimal_table(self):
        language = LanguageConfig.from_dict({
            "code": "nl",
            "name": "Dutch",
            "relative_dates": {
                "vandaag": "today",
                "morgen": "tomorrow",
                "maandag": {"next_weekday": "monday"},
                "overmorgen": {"days_offset": 2},
            },
            "deadline_keywords": ["voor"],
            "recurring_keywords": {"dagelijks": "daily", "wekelijks": {"frequency": "weekly"}},
        })
        assert language.code == "nl"
        assert language.relative_date("morgen") == Tomorrow()
        assert language.relative_date("maandag") == NextWeekday(Weekday.MONDAY)
        assert language.relative_date("overmorgen") == DaysOffset(2)
        assert language.recurring_keyword("dagelijks").frequency is Frequency.DAILY

        task = TaskParser(language).parse("Vergadering morgen", REFERENCE)
        assert task.scheduled_date == date(2026, 10, 20)
        assert task.title == "Vergadering"

    def test_extends_merges_mappings_and_replaces_lists(self):
        language = LanguageConfig.from_dict(
            {"code": "en-x", "relative_dates": {"someday": {"days_offset": 30}},
             "deadline_keywords": ["latest"]},
            base=ENGLISH,
        )
        assert language.relative_date("someday") == DaysOffset(30)
        assert language.relative_date("tomorrow") == Tomorrow()
        assert language.deadline_keywords == ("latest",)
        assert ENGLISH.relative_date("someday") is None

        task = TaskParser(language).parse("Pay latest tomorrow", REFERENCE)
        assert task.deadline == date(2026, 10, 20)

    @pytest.mark.parametrize("data", [
        {"name": "no code"},
        {"code": "x", "relative_dates": {"soon": "eventually"}},
        {"code": "x", "relative_dates": {"soon": "next_weekday"}},
        {"code": "x", "relative_dates": {"soon": {"next_weekday": "funday"}}},
        {"code": "x", "relative_dates": ["today"]},
        {"code": "x", "recurring_keywords": {"often": {"interval": 2}}},
        {"code": "x", "recurring_keywords": {"often": {"frequency": "hourly"}}},
        {"code": "x", "recurring_keywords": {"often": {"frequency": "weekly", "week_of_month": 2}}},
        {"code": "x", "month_names": {"jan": "first"}},
        {"code": "x", "date_patterns": ["(?P<day>\\d+"]},
        {"code": "x", "deadline_keywords": "by"},
        {"code": "x", "colour": "blue"},
    ])
    def test_malformed_tables(self, data):
        with pytest.raises(LanguageConfigError):
            LanguageConfig.from_dict(data)

    def test_error_is_a_value_error(self):
        assert issubclass(LanguageConfigError, ValueError)


class TestLoadLanguageFile:
    """Test loading custom tables from YAML."""

    def test_load_with_extends(self, tmp_path):
        path = tmp_path / "de-x.yaml"
        path.write_text(
            "code: de-x\n"
            "name: Deutsch (Büro)\n"
            "extends: de\n"
            "relative_dates:\n"
            "  zum quartalsende:\n"
            "    days_offset: 90\n",
            encoding="utf-8",
        )
        language = load_language_file(path)
        assert language.code == "de-x"
        assert language.name == "Deutsch (Büro)"
        assert language.relative_date("zum Quartalsende") == DaysOffset(90)
        assert language.relative_date("morgen") is not None

    def test_missing_file(self, tmp_path):
        with pytest.raises(LanguageConfigError, match="Cannot read"):
            load_language_file(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("code: [unclosed\n", encoding="utf-8")
        with pytest.raises(LanguageConfigError, match="Invalid YAML"):
            load_language_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- today\n", encoding="utf-8")
        with pytest.raises(LanguageConfigError):
            load_language_file(path)

    def test_unknown_base(self, tmp_path):
        path = tmp_path / "x.yaml"
        path.write_text("code: x\nextends: klingon\n", encoding="utf-8")
        with pytest.raises(LanguageConfigError, match="Unknown base language"):
            load_language_file(path)
