"""Tests for span bookkeeping."""

import re

import pytest

from taskparse.languages.base import prefix_regex
from taskparse.models import AnnotationType
from taskparse.spans import Candidate, SpanTracker


class TestSpanTracker:
    """Test SpanTracker."""

    def setup_method(self):
        self.tracker = SpanTracker("Call John tomorrow at 3pm #work")

    def test_claim_and_title(self):
        self.tracker.claim(AnnotationType.DATE, 10, 18)
        self.tracker.claim(AnnotationType.TIME, 19, 25)
        self.tracker.claim(AnnotationType.TAG, 26, 31, remove=False)
        assert self.tracker.title() == "Call John #work"
        assert [a.text for a in self.tracker.annotations()] == ["tomorrow", "at 3pm", "#work"]
        assert [a.text for a in self.tracker.removed()] == ["tomorrow", "at 3pm"]

    def test_annotations_sorted_by_start(self):
        self.tracker.claim(AnnotationType.TIME, 19, 25)
        self.tracker.claim(AnnotationType.DATE, 10, 18)
        assert [a.start for a in self.tracker.annotations()] == [10, 19]

    def test_overlapping_claim(self):
        self.tracker.claim(AnnotationType.DATE, 10, 18)
        with pytest.raises(ValueError):
            self.tracker.claim(AnnotationType.TIME, 15, 20)

    @pytest.mark.parametrize("start,end", [(5, 5), (-1, 3), (20, 100)])
    def test_invalid_claim(self, start, end):
        with pytest.raises(ValueError):
            self.tracker.claim(AnnotationType.DATE, start, end)

    def test_is_free_adjacent(self):
        self.tracker.claim(AnnotationType.DATE, 10, 18)
        assert self.tracker.is_free(0, 10)
        assert self.tracker.is_free(18, 20)
        assert not self.tracker.is_free(17, 19)

    def test_is_free_with_claims_out_of_order(self):
        self.tracker.claim(AnnotationType.TAG, 26, 31, remove=False)
        self.tracker.claim(AnnotationType.DATE, 10, 18)
        self.tracker.claim(AnnotationType.TIME, 19, 25)
        assert self.tracker.is_free(0, 10)
        assert self.tracker.is_free(18, 19)
        assert self.tracker.is_free(25, 26)
        assert not self.tracker.is_free(5, 11)
        assert not self.tracker.is_free(0, 31)
        assert not self.tracker.is_free(20, 21)
        assert not self.tracker.is_free(30, 31)
        assert [a.start for a in self.tracker.annotations()] == [10, 19, 26]

    def test_finditer_skips_claimed_text(self):
        self.tracker.claim(AnnotationType.DATE, 10, 18)
        words = [m.group(0) for m in self.tracker.finditer(re.compile(r"\w+"))]
        assert "tomorrow" not in words
        assert words[:2] == ["Call", "John"]

    def test_finditer_none_pattern(self):
        assert list(self.tracker.finditer(None)) == []

    def test_prefix(self):
        pattern = prefix_regex(["at", "around"])
        match = self.tracker.prefix(pattern, 22)
        assert match is not None
        assert match.start() == 19
        assert self.tracker.prefix(pattern, 10) is None

    def test_prefix_must_be_unclaimed(self):
        pattern = prefix_regex(["at"])
        self.tracker.claim(AnnotationType.TIME, 19, 21)
        assert self.tracker.prefix(pattern, 22) is None

    def test_title_collapses_whitespace(self):
        tracker = SpanTracker("  Pay   rent  today ")
        tracker.claim(AnnotationType.DATE, 14, 19)
        assert tracker.title() == "Pay rent"


class TestSelect:
    """Test overlap resolution of candidates."""

    def test_longest_wins_at_same_start(self):
        selected = SpanTracker.select([Candidate(0, 4, 0), Candidate(0, 9, 1)])
        assert [(c.start, c.end) for c in selected] == [(0, 9)]

    def test_earlier_pattern_wins_tie(self):
        selected = SpanTracker.select([Candidate(0, 4, 2, "b"), Candidate(0, 4, 1, "a")])
        assert [c.value for c in selected] == ["a"]

    def test_leftmost_wins_overlap(self):
        selected = SpanTracker.select([Candidate(3, 10, 0), Candidate(0, 5, 1), Candidate(10, 12, 0)])
        assert [(c.start, c.end) for c in selected] == [(0, 5), (10, 12)]

    def test_empty_candidates_dropped(self):
        assert SpanTracker.select([Candidate(2, 2, 0)]) == []
