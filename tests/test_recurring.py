"""Tests for recurrence extraction."""

import pytest

from taskparse.languages import ENGLISH, FRENCH, GERMAN, SPANISH
from taskparse.models import AnnotationType, Frequency, RecurringPattern, Weekday
from taskparse.recurring import RecurrenceExtractor, can_merge
from taskparse.spans import SpanTracker


class TestEnglishRecurrence:
    """Test English recurrence phrases."""

    def setup_method(self):
        self.extractor = RecurrenceExtractor(ENGLISH)

    @pytest.mark.parametrize("phrase,expected", [
        ("daily", RecurringPattern.daily()),
        ("every day", RecurringPattern.daily()),
        ("weekly", RecurringPattern.weekly()),
        ("biweekly", RecurringPattern.weekly(interval=2)),
        ("every other week", RecurringPattern.weekly(interval=2)),
        ("every 3 days", RecurringPattern.daily(3)),
        ("every two months", RecurringPattern(Frequency.MONTHLY, interval=2)),
        ("annually", RecurringPattern.yearly()),
        ("every Monday", RecurringPattern.weekly([Weekday.MONDAY])),
        ("every fri", RecurringPattern.weekly([Weekday.FRIDAY])),
        ("on Tuesdays", RecurringPattern.weekly([Weekday.TUESDAY])),
        ("every other Monday", RecurringPattern.weekly([Weekday.MONDAY], interval=2)),
        ("every 15th", RecurringPattern.monthly_on_day(15)),
        ("monthly on the 1st", RecurringPattern.monthly_on_day(1)),
        ("on the 3rd of every month", RecurringPattern.monthly_on_day(3)),
        ("last day of the month", RecurringPattern.monthly_on_day(-1)),
        ("first Monday of the month", RecurringPattern.monthly_on_weekday(Weekday.MONDAY, 1)),
        ("every second Tuesday of the month", RecurringPattern.monthly_on_weekday(Weekday.TUESDAY, 2)),
        ("last Friday of the month", RecurringPattern.monthly_on_weekday(Weekday.FRIDAY, -1)),
    ])
    def test_phrases(self, phrase, expected):
        assert self.extractor.parse(phrase) == expected

    def test_weekday_list(self):
        pattern = self.extractor.parse("every Monday, Wednesday and Friday")
        assert pattern.days_of_week == (Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY)

    def test_separate_weekly_phrases_merge(self):
        pattern = self.extractor.parse("every Monday and every Friday")
        assert pattern == RecurringPattern.weekly([Weekday.MONDAY, Weekday.FRIDAY])

    def test_conflicting_phrases_last_wins(self):
        assert self.extractor.parse("daily and monthly") == RecurringPattern(Frequency.MONTHLY)

    def test_different_intervals_do_not_merge(self):
        pattern = self.extractor.parse("every Monday and every other Friday")
        assert pattern == RecurringPattern.weekly([Weekday.FRIDAY], interval=2)

    def test_no_recurrence(self):
        assert self.extractor.parse("call mom on Monday") is None

    def test_claims_whole_phrase(self):
        tracker = SpanTracker("Gym every Monday, Wednesday")
        self.extractor.extract(tracker)
        annotation, = tracker.annotations()
        assert annotation.type is AnnotationType.RECURRENCE
        assert annotation.text == "every Monday, Wednesday"
        assert tracker.title() == "Gym"

    def test_invalid_day_is_not_a_match(self):
        assert self.extractor.parse("every 32nd") is None

    @pytest.mark.parametrize("phrase", ["every 0 days", "every 00 weeks", "every 0 monday"])
    def test_zero_interval_is_not_a_match(self, phrase):
        assert self.extractor.parse(phrase) is None

    def test_abbreviation_in_interval_phrase(self):
        expected = RecurringPattern.weekly([Weekday.SATURDAY], interval=2)
        assert self.extractor.parse("every other sat") == expected

    def test_abbreviation_does_not_continue_a_weekday_list(self):
        tracker = SpanTracker("Gym every Monday and sat down")
        pattern = self.extractor.extract(tracker)
        assert pattern.days_of_week == (Weekday.MONDAY,)
        assert tracker.title() == "Gym and sat down"


class TestOtherLanguages:
    """Recurrence phrases in German, French and Spanish."""

    @pytest.mark.parametrize("language,phrase,expected", [
        (GERMAN, "täglich", RecurringPattern.daily()),
        (GERMAN, "alle 3 Tage", RecurringPattern.daily(3)),
        (GERMAN, "jeden zweiten Montag", RecurringPattern.weekly([Weekday.MONDAY], interval=2)),
        (GERMAN, "jeden Dienstag und Freitag", RecurringPattern.weekly([Weekday.TUESDAY, Weekday.FRIDAY])),
        (GERMAN, "am letzten Tag des Monats", RecurringPattern.monthly_on_day(-1)),
        (GERMAN, "jeden 15.", RecurringPattern.monthly_on_day(15)),
        (GERMAN, "erster Montag im Monat", RecurringPattern.monthly_on_weekday(Weekday.MONDAY, 1)),
        (FRENCH, "tous les jours", RecurringPattern.daily()),
        (FRENCH, "tous les lundis", RecurringPattern.weekly([Weekday.MONDAY])),
        (FRENCH, "tous les deux lundis", RecurringPattern.weekly([Weekday.MONDAY], interval=2)),
        (FRENCH, "le premier lundi du mois", RecurringPattern.monthly_on_weekday(Weekday.MONDAY, 1)),
        (FRENCH, "le 15 de chaque mois", RecurringPattern.monthly_on_day(15)),
        (SPANISH, "todos los días", RecurringPattern.daily()),
        (SPANISH, "cada 2 semanas", RecurringPattern.weekly(interval=2)),
        (SPANISH, "el primer lunes del mes", RecurringPattern.monthly_on_weekday(Weekday.MONDAY, 1)),
        (SPANISH, "el 15 de cada mes", RecurringPattern.monthly_on_day(15)),
    ])
    def test_phrases(self, language, phrase, expected):
        assert RecurrenceExtractor(language).parse(phrase) == expected


class TestCanMerge:

    def test_weekly_same_interval(self):
        assert can_merge(RecurringPattern.weekly([Weekday.MONDAY]), RecurringPattern.weekly([Weekday.FRIDAY]))

    def test_other_frequencies(self):
        assert not can_merge(RecurringPattern.daily(), RecurringPattern.weekly([Weekday.FRIDAY]))
        assert not can_merge(RecurringPattern.weekly(interval=2), RecurringPattern.weekly())
