"""Unit tests for markdown export."""

from pathlib import Path

import pytest

from pitch_reviewer.contexts.assessment import ReviewAssessment
from pitch_reviewer.contexts.assessment.markdown_formatter import (
    assessment_to_markdown,
    review_to_markdown,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


class TestReviewToMarkdown:
    """Tests for exporting the raw review."""

    @pytest.mark.unit
    def test_nothing_to_export(self):
        assert review_to_markdown(None, None) == ""

    @pytest.mark.unit
    def test_quote_markers_removed(self):
        general = "> **Score:** 74/100\n> Strong team."
        markdown = review_to_markdown(general, "| a | b |")

        assert markdown == "# Pitch-Deck Review\n\n**Score:** 74/100\nStrong team.\n\n| a | b |"

    @pytest.mark.unit
    def test_detailed_only(self):
        assert review_to_markdown(None, "| a |") == "# Pitch-Deck Review\n\n\n\n| a |"


class TestAssessmentToMarkdown:
    """Tests for rendering a full assessment."""

    @pytest.mark.unit
    def test_english_sections(self):
        assessment = ReviewAssessment.from_file(FIXTURES_PATH / "review_en.md", locale="EN")
        markdown = assessment_to_markdown(assessment)

        assert markdown.startswith("# LATAM Pitch Reviewer\n")
        assert "## Summary" in markdown
        assert "- Market: Cite & segment SOM bottom-up by country/vertical." in markdown
        assert "- **Ask:** Round set (US$800k)." in markdown
        assert "### Market (5/10)" in markdown
        assert "## What’s missing\n\n- **Market:** Credible sizing & SOM drive focus and upside." in markdown
        assert "### Valuation" in markdown
        assert "- **Competition:** Competitive map gives context & moats." in markdown
        assert "[Fondo Andino](https://www.linkedin.com/company/fondo-andino)" in markdown
        assert "- +3 more in Pitch Expert" in markdown

    @pytest.mark.unit
    def test_spanish_headings(self):
        assessment = ReviewAssessment.from_file(FIXTURES_PATH / "review_es.md", locale="ES")
        markdown = assessment_to_markdown(assessment)

        assert markdown.startswith("# Revisor de Pitches LATAM\n")
        assert "## Resumen" in markdown
        assert "### Valoración" in markdown
        assert "## Qué falta" in markdown
        assert "**Interés inversor:**" in markdown
        assert "+3 más en Pitch Expert" in markdown

    @pytest.mark.unit
    def test_empty_review_still_renders_cards(self):
        assessment = ReviewAssessment.from_text("", locale="EN")
        markdown = assessment_to_markdown(assessment)

        assert "## Summary" not in markdown
        assert "- **Ask:** Not specified" in markdown
        assert "## Sections / key info missing" not in markdown
