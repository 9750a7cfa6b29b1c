"""Unit tests for segment enrichment."""

import pytest

from pitch_reviewer.contexts.assessment.enricher import enrich_segment, enrich_segments
from pitch_reviewer.contexts.intake.review_data_structures import LANE_CAPACITY, LaneBuckets, Segment


class TestEnrichSegment:
    """Tests for keyword-driven padding of one segment."""

    @pytest.mark.unit
    def test_market_gets_all_three_hints(self):
        segment = Segment("Market", 5, LaneBuckets(missing=("Cite sources",)))
        enriched = enrich_segment(segment, "EN")

        assert enriched.lanes.missing == (
            "Cite sources",
            "SOM by country (formula & assumptions)",
        )
        assert enriched.lanes.importance == ("Guides GTM and round sizing",)
        assert enriched.lanes.value == ("Bottom-up table: (#customers × ARPU × penetration)",)

    @pytest.mark.unit
    def test_spanish_hints(self):
        enriched = enrich_segment(Segment("Traction", 7), "ES-MX")

        assert enriched.lanes.missing == ("Cohortes y retención M2/M3",)
        assert enriched.lanes.importance == ("Evidencia de PMF y eficiencia",)
        assert enriched.lanes.value == ("Gráfico de retención y embudo",)

    @pytest.mark.unit
    def test_keyword_without_importance_hint(self):
        """Team defines no importance hint, so that lane stays untouched."""
        enriched = enrich_segment(Segment("Founding Team", 8), "EN")

        assert enriched.lanes.missing == ("Senior commercial role (quota carrier)",)
        assert enriched.lanes.importance == ()
        assert enriched.lanes.value == ("Hiring plan for 2–3 key roles",)

    @pytest.mark.unit
    def test_unknown_name_unchanged(self):
        segment = Segment("Design", 6, LaneBuckets(good=("Clean",)))

        assert enrich_segment(segment, "EN") == segment

    @pytest.mark.unit
    def test_full_lane_not_padded(self):
        segment = Segment("Market", 5, LaneBuckets(missing=("a", "b", "c")))
        enriched = enrich_segment(segment, "EN")

        assert enriched.lanes.missing == ("a", "b", "c")
        assert len(enriched.lanes.importance) == 1

    @pytest.mark.unit
    def test_overfull_lane_never_evicted(self):
        segment = Segment("Market", 5, LaneBuckets(value=("1", "2", "3", "4")))
        enriched = enrich_segment(segment, "EN")

        assert enriched.lanes.value == ("1", "2", "3", "4")

    @pytest.mark.unit
    def test_input_not_mutated(self):
        segment = Segment("Problem", 8)
        enrich_segment(segment, "EN")

        assert segment.lanes == LaneBuckets()


class TestEnrichSegments:
    """Tests for enriching a whole review."""

    @pytest.mark.unit
    def test_order_preserved_and_capacity_respected(self):
        segments = [
            Segment("Problem", 8, LaneBuckets(missing=("x", "y"))),
            Segment("Ask", 6),
            Segment("Market", 5, LaneBuckets(missing=("p", "q", "r"))),
        ]
        enriched = enrich_segments(segments, "EN")

        assert [s.name for s in enriched] == ["Problem", "Ask", "Market"]
        assert enriched[1] == segments[1]
        for segment in enriched:
            for lane in ("missing", "importance", "value"):
                assert len(getattr(segment.lanes, lane)) <= LANE_CAPACITY

    @pytest.mark.unit
    def test_empty(self):
        assert enrich_segments([], "ES") == ()
