"""
Unit tests for investor ranking.

Expected orders are worked out from the built-in catalog:
geography first, then sector, then ticket size, then match score.
"""

import pytest

from pitch_reviewer.contexts.matching.investor_catalog import DEFAULT_INVESTOR_CATALOG, InvestorProfile
from pitch_reviewer.contexts.matching.investor_matcher import (
    linkedin_url,
    rank_investors,
    split_overflow,
)


def _names(ranked):
    return [investor.name for investor in ranked]


class TestRankInvestors:
    """Tests for scoring and ordering the built-in catalog."""

    @pytest.mark.unit
    def test_fintech_mexico_high_traction(self):
        ranked = rank_investors("Pre-seed", 8, "Fintech", "México")

        assert len(ranked) >= 3
        assert _names(ranked) == [
            "Pacífico Capital",
            "Fondo Andino",
            "Río Ventures",
            "Altiplano Ventures",
            "Pampas Partners",
            "Caribe Labs",
        ]

    @pytest.mark.unit
    def test_rationale_and_scores(self):
        ranked = rank_investors("Pre-seed", 8, "Fintech", "México")

        assert ranked[0].match_score == 3
        assert ranked[0].rationale == "Geo aligned • Sector thesis • Stage fit"
        assert ranked[1].rationale == "Sector thesis • Stage fit"
        assert ranked[2].rationale == "Stage fit"
        for investor in ranked:
            assert 0 <= investor.match_score <= 3
            assert investor.rationale

    @pytest.mark.unit
    def test_low_traction_prefers_small_tickets(self):
        ranked = rank_investors("Pre-seed", 6, "General", "LATAM")

        assert _names(ranked) == [
            "Fondo Andino",
            "Río Ventures",
            "Pacífico Capital",
            "Caribe Labs",
            "Pampas Partners",
            "Altiplano Ventures",
        ]

    @pytest.mark.unit
    def test_traction_at_cutoff_uses_min_ticket(self):
        """Traction must be strictly above the cutoff to prefer large tickets."""
        at_cutoff = rank_investors("Seed", 7, "General", "Caribe")
        above = rank_investors("Seed", 8, "General", "Caribe")

        assert _names(at_cutoff)[1] == "Fondo Andino"
        assert _names(above)[1] == "Pacífico Capital"

    @pytest.mark.unit
    def test_match_score_never_decreases_down_the_list(self):
        ranked = rank_investors("Seed", 9, "SaaS", "Brasil")
        scores = [investor.match_score for investor in ranked]

        assert scores == sorted(scores, reverse=True)

    @pytest.mark.unit
    def test_unknown_stage_yields_nothing(self):
        assert rank_investors("Series A", 8, "Fintech", "México") == ()

    @pytest.mark.unit
    def test_catalog_order_breaks_full_ties(self):
        twin = dict(geo="Andes", focus="SaaS", stages=frozenset({"Seed"}), min_ticket=1, max_ticket=2)
        catalog = (InvestorProfile(name="Zeta", **twin), InvestorProfile(name="Alfa", **twin))

        assert _names(rank_investors("Seed", catalog=catalog)) == ["Zeta", "Alfa"]

    @pytest.mark.unit
    def test_deterministic(self):
        first = rank_investors("Pre-seed", 8, "Fintech", "México")

        assert first == rank_investors("Pre-seed", 8, "Fintech", "México")
        assert len(DEFAULT_INVESTOR_CATALOG) == 6


class TestLinkedinUrl:
    """Tests for profile URLs."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name, slug",
        [
            ("Pacífico Capital", "pacifico-capital"),
            ("Río Ventures", "rio-ventures"),
            ("Data & AI  Fund!", "data-ai-fund"),
        ],
    )
    def test_slug(self, name, slug):
        assert linkedin_url(name) == f"https://www.linkedin.com/company/{slug}"

    @pytest.mark.unit
    def test_ranked_urls_are_https(self):
        for investor in rank_investors("Pre-seed", 8, "Fintech", "México"):
            assert investor.linkedin_url.startswith("https://")


class TestSplitOverflow:
    """Tests for the top-three display split."""

    @pytest.mark.unit
    def test_six_investors(self):
        ranked = rank_investors("Pre-seed", 6, "General", "LATAM")
        shown, hidden = split_overflow(ranked)

        assert _names(shown) == ["Fondo Andino", "Río Ventures", "Pacífico Capital"]
        assert hidden == 3

    @pytest.mark.unit
    def test_fewer_than_shown(self):
        ranked = rank_investors("Pre-seed", 6)[:2]

        assert split_overflow(ranked) == (ranked, 0)
        assert split_overflow(()) == ((), 0)
