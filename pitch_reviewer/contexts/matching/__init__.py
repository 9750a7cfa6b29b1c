"""
Matching Context

Responsibilities:
- Holds the investor catalog (built-in or loaded from YAML)
- Scores and ranks investors against the assessed stage, sector, country and traction

Owns: Investor profiles, match scoring, ranking order
Never: Parses reviews or produces review text
"""

from pitch_reviewer.contexts.matching.investor_catalog import (
    DEFAULT_INVESTOR_CATALOG,
    InvestorProfile,
    load_investor_catalog,
)
from pitch_reviewer.contexts.matching.investor_matcher import (
    RankedInvestor,
    rank_investors,
    split_overflow,
)

__all__ = [
    "DEFAULT_INVESTOR_CATALOG",
    "InvestorProfile",
    "load_investor_catalog",
    "RankedInvestor",
    "rank_investors",
    "split_overflow",
]
