"""
Key-fact cards synthesized from segment scores and lanes.

Five cards (valuation, traction, team, market, problem) plus an overall
investor-interest verdict. Every card is always producible: a category that
is absent from the review resolves to a zero-score placeholder segment.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from pitch_reviewer.contexts.assessment.defaults import DEFAULT_THRESHOLDS, ScoringThresholds
from pitch_reviewer.contexts.assessment.labels import FactCardText, get_labels
from pitch_reviewer.contexts.intake.review_data_structures import Segment

# Cap on evidence strings shown per card
FROM_DECK_LIMIT = 2


@dataclass(frozen=True)
class KeyFactCard:
    """
    One fact card.

    Attributes:
        from_deck: Up to two evidence strings quoted from the review
        evaluation: Threshold-selected assessment sentence
        benchmark: Comparable benchmark sentence
        ask: Funding ask (valuation card only)
    """

    from_deck: Tuple[str, ...]
    evaluation: str
    benchmark: str
    ask: Optional[str] = None


@dataclass(frozen=True)
class KeyFacts:
    """All fact cards plus the overall verdict."""

    valuation: KeyFactCard
    traction: KeyFactCard
    team: KeyFactCard
    market: KeyFactCard
    problem: KeyFactCard
    verdict: str

    def cards(self) -> Tuple[KeyFactCard, ...]:
        """Cards in display order (valuation, traction, team, market, problem)."""
        return (self.valuation, self.traction, self.team, self.market, self.problem)


def find_segment(segments: Tuple[Segment, ...], category: str) -> Segment:
    """
    First segment whose name contains category (case-insensitive).

    Returns a zero-score placeholder named after the category when none matches.
    """
    needle = category.lower()
    for segment in segments:
        if needle in segment.name.lower():
            return segment
    return Segment(name=category, score=0)


def deck_evidence(segment: Segment, fallback: str) -> Tuple[str, ...]:
    """First strength and first example of a segment, or (fallback,) if neither exists."""
    picks = []
    if segment.lanes.good and segment.lanes.good[0]:
        picks.append(segment.lanes.good[0])
    if segment.lanes.value and segment.lanes.value[0]:
        picks.append(segment.lanes.value[0])
    return tuple(picks[:FROM_DECK_LIMIT]) or (fallback,)


def _card(segment: Segment, text: FactCardText, strong: bool, ask: Optional[str] = None) -> KeyFactCard:
    return KeyFactCard(
        from_deck=deck_evidence(segment, text.placeholder),
        evaluation=text.strong if strong else text.weak,
        benchmark=text.benchmark,
        ask=ask,
    )


def derive_key_facts(
    segments: Iterable[Segment],
    locale="ES",
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> KeyFacts:
    """
    Build the five key-fact cards and the verdict.

    Args:
        segments: Enriched segments
        locale: Any locale token
        thresholds: Score thresholds selecting each evaluation

    Returns:
        KeyFacts with every string in the resolved locale
    """
    segments = tuple(segments)
    labels = get_labels(locale)

    market = find_segment(segments, "Market")
    traction = find_segment(segments, "Traction")
    team = find_segment(segments, "Team")
    problem = find_segment(segments, "Problem")
    ask = find_segment(segments, "Ask")

    combined = market.score + traction.score + team.score
    attractive = (
        traction.score >= thresholds.verdict_traction
        and problem.score >= thresholds.verdict_problem
    )

    return KeyFacts(
        valuation=_card(
            market,
            labels.valuation,
            strong=combined >= thresholds.valuation_combined,
            ask=deck_evidence(ask, labels.ask_not_specified)[0],
        ),
        traction=_card(traction, labels.traction, strong=traction.score >= thresholds.traction_strong),
        team=_card(team, labels.team, strong=team.score >= thresholds.team_strong),
        market=_card(market, labels.market, strong=market.score >= thresholds.market_credible),
        problem=_card(problem, labels.problem, strong=problem.score >= thresholds.problem_validated),
        verdict=labels.verdict_attractive if attractive else labels.verdict_early,
    )
