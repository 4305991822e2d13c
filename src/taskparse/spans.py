"""Bookkeeping of which parts of the input have been consumed."""

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Match, Optional, Pattern, Tuple

from .languages.base import PREFIX_WINDOW
from .models import Annotation, AnnotationType


@dataclass(frozen=True)
class Candidate:
    """A possible extraction, waiting for overlap resolution."""
    start: int
    end: int
    order: int = 0  # tie-breaker: position of the source pattern in its table
    value: Any = field(default=None, compare=False)
    match: Optional[Match] = field(default=None, compare=False)

    @property
    def length(self) -> int:
        return self.end - self.start


class SpanTracker:
    """Claimed ranges of one input string.

    Claims never overlap, so they are kept sorted by start offset and
    looked up by bisection. Each parse call creates its own tracker; it is
    never shared.
    """

    def __init__(self, text: str):
        self.text = text
        self._starts: List[int] = []
        self._claims: List[Tuple[Annotation, bool]] = []

    def is_free(self, start: int, end: int) -> bool:
        """True if no claimed range overlaps ``[start, end)``."""
        index = bisect_right(self._starts, start)
        if index > 0 and self._claims[index - 1][0].end > start:
            return False
        if index < len(self._starts) and self._starts[index] < end:
            return False
        return True

    def claim(self, kind: AnnotationType, start: int, end: int, remove: bool = True) -> Annotation:
        """Record an annotation for ``[start, end)``.

        Args:
            kind: Kind of the recognised span
            start: Start offset into the input
            end: End offset into the input
            remove: Whether the span is dropped from the title

        Returns:
            The recorded annotation

        Raises:
            ValueError: If the range is empty or overlaps a claimed range
        """
        if not 0 <= start < end <= len(self.text):
            raise ValueError(f"Invalid span {start}:{end}")
        if not self.is_free(start, end):
            raise ValueError(f"Span {start}:{end} overlaps a claimed range")
        annotation = Annotation(kind, start, end, self.text[start:end])
        index = bisect_right(self._starts, start)
        self._starts.insert(index, start)
        self._claims.insert(index, (annotation, remove))
        return annotation

    def finditer(self, pattern: Optional[Pattern]) -> Iterator[Match]:
        """Yield non-empty matches of ``pattern`` lying entirely in unclaimed text."""
        if pattern is None:
            return
        for match in pattern.finditer(self.text):
            if match.end() > match.start() and self.is_free(match.start(), match.end()):
                yield match

    def prefix(self, pattern: Optional[Pattern], pos: int) -> Optional[Match]:
        """Match a keyword that ends (up to whitespace) directly before ``pos``.

        ``pattern`` comes from ``languages.base.prefix_regex``. The keyword
        must lie in unclaimed text.
        """
        if pattern is None:
            return None
        match = pattern.search(self.text, max(0, pos - PREFIX_WINDOW), pos)
        if match and self.is_free(match.start(), pos):
            return match
        return None

    @staticmethod
    def select(candidates: Iterable[Candidate]) -> List[Candidate]:
        """Resolve overlapping candidates.

        Candidates are taken left to right, the longest first at equal
        start (then the one from the earlier pattern); a candidate that
        overlaps an already accepted one is dropped.
        """
        accepted: List[Candidate] = []
        accepted_end = 0
        for candidate in sorted(candidates, key=lambda c: (c.start, -c.length, c.order)):
            # Accepted candidates are disjoint and sorted, so only the last can overlap.
            if candidate.length <= 0 or (accepted and candidate.start < accepted_end):
                continue
            accepted.append(candidate)
            accepted_end = candidate.end
        return accepted

    def annotations(self) -> Tuple[Annotation, ...]:
        """All annotations, sorted by start offset."""
        return tuple(a for a, _ in self._claims)

    def removed(self) -> Tuple[Annotation, ...]:
        """Annotations whose text is dropped from the title, sorted by start."""
        return tuple(a for a, remove in self._claims if remove)

    def title(self) -> str:
        """The input without removed spans, whitespace collapsed."""
        parts = []
        pos = 0
        for annotation in self.removed():
            parts.append(self.text[pos:annotation.start])
            pos = annotation.end
        parts.append(self.text[pos:])
        return " ".join(" ".join(parts).split())
