"""
Unit tests for review table parsing.

Covers the primary scored table, the "what's missing" table and the
best-effort handling of malformed input.
"""

from pathlib import Path

import pytest

from pitch_reviewer.contexts.intake.review_data_structures import Lane, MissingEntry, ParsedReview
from pitch_reviewer.contexts.intake.review_parser import (
    parse_review_file,
    parse_review_text,
    parse_segment_row,
)
from pitch_reviewer.contexts.intake.review_patterns import classify_bullet

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"

TRAILING_PIPE_TABLE = """| Bucket | Score | Improvement |
|--------|-----:|------------|
| Market | 5 | **Why:** a<br>**Improvement:** b|"""


class TestCanonicalTables:
    """Tests against the canonical English and Spanish review fixtures."""

    @pytest.mark.unit
    def test_english_segments_in_table_order(self):
        parsed = parse_review_file(FIXTURES_PATH / "review_en.md")

        names = [s.name for s in parsed.segments]
        assert names == [
            "Problem",
            "Solution",
            "Market",
            "Business Model",
            "Traction",
            "Team",
            "Ask",
            "Design",
        ]
        assert [s.score for s in parsed.segments] == [8, 7, 5, 6, 7, 8, 6, 6]

    @pytest.mark.unit
    def test_english_has_ask_segment(self):
        parsed = parse_review_file(FIXTURES_PATH / "review_en.md")

        assert len(parsed.segments) >= 6
        assert any("ask" in s.name.lower() for s in parsed.segments)

    @pytest.mark.unit
    def test_english_lanes_are_classified(self):
        parsed = parse_review_file(FIXTURES_PATH / "review_en.md")
        market = parsed.segments[2]

        assert market.lanes.good == ("TAM stated, sources unclear; LATAM focus.",)
        assert market.lanes.missing == ("Cite & segment SOM bottom-up by country/vertical.",)
        assert market.lanes.importance == ("Credible focus & upside for funds.",)
        assert market.lanes.value == ("vertical cohorts + SOM formula.",)

    @pytest.mark.unit
    def test_english_missing_table(self):
        parsed = parse_review_file(FIXTURES_PATH / "review_en.md")

        assert parsed.missing == (
            MissingEntry("Market", "Credible sizing & SOM drive focus and upside."),
            MissingEntry("Business Model", "Channel unit economics signal scalability."),
        )

    @pytest.mark.unit
    def test_spanish_lanes_are_classified(self):
        parsed = parse_review_file(FIXTURES_PATH / "review_es.md")
        problem = parsed.segments[0]

        assert len(parsed.segments) == 8
        assert problem.lanes.good == ("Dolor concreto con evidencia cualitativa.",)
        assert problem.lanes.importance == ("Dolor validado → adopción y priorización de roadmap.",)
        assert problem.lanes.value == ("encuesta con N y %, casos de uso top-2.",)

    @pytest.mark.unit
    def test_spanish_missing_table_detected(self):
        """The "Qué falta" marker introduces the Spanish missing table."""
        parsed = parse_review_file(FIXTURES_PATH / "review_es.md")

        assert [entry.section for entry in parsed.missing] == ["Market", "Business Model"]
        assert parsed.missing[1].why == "Unit economics por canal señalan escalabilidad."


class TestRowEdgeCases:
    """Tests for trailing pipes, scores and short rows."""

    @pytest.mark.unit
    def test_trailing_pipe_is_ignored(self):
        """A row ending in "|" still reads the improvement cell."""
        parsed = parse_review_text(TRAILING_PIPE_TABLE)

        assert len(parsed.segments) == 1
        segment = parsed.segments[0]
        assert segment.score == 5
        assert segment.lanes.missing == ("b",)
        assert segment.lanes.good == ("a",)
        assert parsed.missing == ()

    @pytest.mark.unit
    def test_row_without_header(self):
        parsed = parse_review_text("| Market | 5 | **Why:** a<br>**Improvement:** b|")

        assert len(parsed.segments) == 1
        assert parsed.segments[0].lanes.missing == ("b",)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "cell, expected",
        [("7", 7), ("8/10", 8), ("15", 10), ("-3", 0), ("n/a", 0), ("", 0)],
    )
    def test_score_parsing_and_clamping(self, cell, expected):
        segment = parse_segment_row(f"| Team | {cell} | **Why:** ok |")

        assert segment.score == expected

    @pytest.mark.unit
    def test_short_rows_are_skipped(self):
        assert parse_segment_row("| Team | 5") is None

    @pytest.mark.unit
    def test_header_and_separator_rows_are_skipped(self):
        assert parse_segment_row("| Bucket | Score | Improvement |") is None
        assert parse_segment_row("| Sección | Score | Mejora |") is None
        assert parse_segment_row("|--------|-----:|------------|") is None

    @pytest.mark.unit
    def test_line_break_variants_split_bullets(self):
        segment = parse_segment_row(
            "| Team | 6 | **Why:** a<BR/>**Mejora:** b<br />**Ejemplo:** c |"
        )

        assert segment.lanes.good == ("a",)
        assert segment.lanes.missing == ("b",)
        assert segment.lanes.value == ("c",)


class TestTableBoundaries:
    """Tests for where each table starts and stops."""

    @pytest.mark.unit
    def test_blank_line_ends_primary_table(self):
        text = "| A | 5 | **Why:** x |\n\n| B | 6 | **Why:** y |"
        parsed = parse_review_text(text)

        assert [s.name for s in parsed.segments] == ["A"]

    @pytest.mark.unit
    def test_leading_text_before_table_is_skipped(self):
        text = "> **Score:** 74/100\n\n| Bucket | Score | Improvement |\n| A | 5 | x |\n"
        parsed = parse_review_text(text)

        assert [s.name for s in parsed.segments] == ["A"]
        assert parsed.segments[0].lanes.good == ("x",)

    @pytest.mark.unit
    def test_missing_table_stops_at_blank_line(self):
        text = (
            "| A | 5 | x |\n\n"
            "**What's missing:**\n\n"
            "| Section | Why it matters |\n"
            "|---------|----|\n"
            "| Team | Hiring plan |\n"
            "\n"
            "| Extra | Not part of the table |\n"
        )
        parsed = parse_review_text(text)

        assert parsed.missing == (MissingEntry("Team", "Hiring plan"),)

    @pytest.mark.unit
    def test_missing_table_alone_yields_no_segments(self):
        """Rows after the marker never count as scored segments."""
        text = (
            "> **Score:** 74/100\n\n"
            "**What's missing:**\n\n"
            "| Section | Why it matters |\n"
            "|---------|----|\n"
            "| Market | Credible sizing |\n"
        )
        parsed = parse_review_text(text)

        assert parsed.segments == ()
        assert parsed.missing == (MissingEntry("Market", "Credible sizing"),)

    @pytest.mark.unit
    def test_marker_text_inside_a_row_is_not_the_marker(self):
        text = (
            "| Market | 5 | **Qué falta:** SOM |\n"
            "| Team | 7 | **Why:** ok |\n\n"
            "**Qué falta:**\n\n"
            "| Sección | Por qué importa |\n"
            "| Team | Plan de contratación |\n"
        )
        parsed = parse_review_text(text)

        assert [s.name for s in parsed.segments] == ["Market", "Team"]
        assert parsed.missing == (MissingEntry("Team", "Plan de contratación"),)


class TestDegradedInput:
    """Malformed input never raises."""

    @pytest.mark.unit
    @pytest.mark.parametrize("text", [None, "", "no tables here", "|", "| only |"])
    def test_degrades_to_empty(self, text):
        assert parse_review_text(text) == ParsedReview()

    @pytest.mark.unit
    def test_windows_line_endings(self):
        parsed = parse_review_text("| A | 5 | x |\r\n| B | 6 | y |\r\n")

        assert [s.name for s in parsed.segments] == ["A", "B"]


class TestClassifyBullet:
    """Tests for bullet lane classification."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "bullet, lane, text",
        [
            ("**Why:** strong team", Lane.GOOD, "strong team"),
            ("**Por qué:** equipo sólido", Lane.GOOD, "equipo sólido"),
            ("**improvement:** cite sources", Lane.MISSING, "cite sources"),
            ("**Why investors care:** upside", Lane.IMPORTANCE, "upside"),
            ("**Por qué importa:** foco", Lane.IMPORTANCE, "foco"),
            ("**Example:** cohort chart", Lane.VALUE, "cohort chart"),
            ("Unlabeled strength", Lane.GOOD, "Unlabeled strength"),
        ],
    )
    def test_classify(self, bullet, lane, text):
        assert classify_bullet(bullet) == (lane, text)
