"""Unit tests for summary bullet derivation."""

import pytest

from pitch_reviewer.contexts.assessment.summary import derive_summary_bullets, first_usable_text
from pitch_reviewer.contexts.intake.review_data_structures import LaneBuckets, Segment


@pytest.mark.unit
def test_weakest_segments_first():
    segments = [
        Segment("Team", 8, LaneBuckets(missing=("hire sales",))),
        Segment("Market", 4, LaneBuckets(missing=("cite sources",))),
        Segment("Traction", 6, LaneBuckets(missing=("cohorts",))),
    ]

    assert derive_summary_bullets(segments) == (
        "Market: cite sources",
        "Traction: cohorts",
        "Team: hire sales",
    )


@pytest.mark.unit
def test_at_most_three_bullets():
    segments = [Segment(f"S{i}", i, LaneBuckets(missing=(f"fix {i}",))) for i in range(6)]

    assert derive_summary_bullets(segments) == ("S0: fix 0", "S1: fix 1", "S2: fix 2")


@pytest.mark.unit
def test_ties_keep_table_order():
    segments = [
        Segment("B", 6, LaneBuckets(missing=("b",))),
        Segment("A", 6, LaneBuckets(missing=("a",))),
    ]

    assert derive_summary_bullets(segments) == ("B: b", "A: a")


@pytest.mark.unit
def test_placeholder_only_segment_skipped():
    """A segment with only placeholder text doesn't take a slot."""
    segments = [
        Segment("Ghost", 1, LaneBuckets(missing=("—",), good=("",))),
        Segment("Market", 5, LaneBuckets(importance=("upside",))),
    ]

    assert derive_summary_bullets(segments) == ("Market: upside",)


@pytest.mark.unit
def test_lane_priority():
    segment = Segment("X", 3, LaneBuckets(good=("g",), value=("v",), missing=("—", "m")))

    assert first_usable_text(segment) == "m"
    assert first_usable_text(Segment("Y", 3, LaneBuckets(good=("g",)))) == "g"
    assert first_usable_text(Segment("Z", 3)) is None


@pytest.mark.unit
def test_no_segments():
    assert derive_summary_bullets([]) == ()
