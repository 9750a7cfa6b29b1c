"""
Default tuning values for the Assessment context.

The score thresholds are narrative tuning values for the generated verdicts.
They are grouped in ScoringThresholds so a YAML config can override them
(see config_resolver.py) without touching the derivation code.
"""

from dataclasses import dataclass, fields

# Summary bullets collected across segments
SUMMARY_BULLET_LIMIT = 3

# Lane entries that count as "no content"
PLACEHOLDER_TEXTS = ("", "—")

# Traction score assumed for investor matching when no Traction segment scores
DEFAULT_TRACTION_SCORE = 6


@dataclass(frozen=True)
class ScoringThresholds:
    """
    Score thresholds (0-10 scale unless noted) used by key facts and matching.

    Attributes:
        valuation_combined: Market + Traction + Team total for an "in range" valuation
        traction_strong: Traction score for a positive traction card
        team_strong: Team score for a strong team card
        market_credible: Market score for credible sizing
        problem_validated: Problem score for validated pain
        verdict_traction: Traction score needed for the "attractive" verdict
        verdict_problem: Problem score needed for the "attractive" verdict
        ticket_traction_cutoff: Traction above this ranks investors by largest ticket
    """

    valuation_combined: int = 20
    traction_strong: int = 7
    team_strong: int = 7
    market_credible: int = 6
    problem_validated: int = 7
    verdict_traction: int = 7
    verdict_problem: int = 7
    ticket_traction_cutoff: int = 7


DEFAULT_THRESHOLDS = ScoringThresholds()

THRESHOLD_NAMES = tuple(f.name for f in fields(ScoringThresholds))
