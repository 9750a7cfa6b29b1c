"""
Record types for parsed pitch-deck reviews.

Every record is immutable. Enrichment and derivation build new records
instead of mutating parsed ones, so repeated runs compare equal.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Tuple

# Lanes hold at most this many entries once enrichment completes
LANE_CAPACITY = 3


class Lane(str, Enum):
    """Feedback lane a bullet belongs to."""

    GOOD = "good"
    MISSING = "missing"
    IMPORTANCE = "importance"
    VALUE = "value"


@dataclass(frozen=True)
class LaneBuckets:
    """
    Four ordered feedback lanes attached to a segment.

    Attributes:
        good: Strengths ("Why:" bullets and unlabeled text)
        missing: Improvement suggestions
        importance: Why the improvement matters to investors
        value: Examples or evidence to add
    """

    good: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()
    importance: Tuple[str, ...] = ()
    value: Tuple[str, ...] = ()

    def get(self, lane: Lane) -> Tuple[str, ...]:
        return getattr(self, Lane(lane).value)

    def padded(self, lane: Lane, items: Iterable[str], capacity: int = LANE_CAPACITY) -> "LaneBuckets":
        """
        Return a copy with items appended to one lane while it has room.

        Existing entries are never evicted or reordered; empty items are skipped.
        """
        entries = list(self.get(lane))
        for item in items:
            if item and len(entries) < capacity:
                entries.append(item)
        return replace(self, **{Lane(lane).value: tuple(entries)})


@dataclass(frozen=True)
class Segment:
    """One scored category row of the review table (e.g., Market, Team)."""

    name: str
    score: int
    lanes: LaneBuckets = LaneBuckets()


@dataclass(frozen=True)
class MissingEntry:
    """A section that is weak or absent, with the reason it matters."""

    section: str
    why: str


@dataclass(frozen=True)
class ParsedReview:
    """
    Result of parsing a review document.

    segments keeps table row order; missing keeps "what's missing" row order.
    """

    segments: Tuple[Segment, ...] = ()
    missing: Tuple[MissingEntry, ...] = ()
