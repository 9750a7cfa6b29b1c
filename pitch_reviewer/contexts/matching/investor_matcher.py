"""
Investor ranking for the Matching context.

Ranking is a cascade of four stable sorts over the same list. Each pass
reorders the whole list, and because every pass is stable, a later pass only
breaks its own ties using the order left by the passes before it. Dominance,
strongest last:

    4. match_score, descending
    3. ticket size (largest max first when traction is high, else smallest min first)
    2. sector match first
    1. geography match first

Catalog order is what remains when every key ties.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from pitch_reviewer.contexts.matching.investor_catalog import (
    DEFAULT_INVESTOR_CATALOG,
    InvestorProfile,
)
from pitch_reviewer.utils.text_processing import slugify

LINKEDIN_URL_TEMPLATE = "https://www.linkedin.com/company/{slug}"

GEO_LABEL = "Geo aligned"
SECTOR_LABEL = "Sector thesis"
STAGE_LABEL = "Stage fit"
GENERALIST_LABEL = "Generalist"
RATIONALE_SEPARATOR = " • "

# Traction above this prefers the largest tickets
TICKET_TRACTION_CUTOFF = 7

# Investors shown directly; the rest are reported as an overflow count
SHOWN_INVESTORS = 3


@dataclass(frozen=True)
class RankedInvestor:
    """An investor profile scored against one assessment."""

    profile: InvestorProfile
    linkedin_url: str
    match_score: int
    rationale: str

    @property
    def name(self) -> str:
        return self.profile.name

    @property
    def geo(self) -> str:
        return self.profile.geo

    @property
    def focus(self) -> str:
        return self.profile.focus

    @property
    def stages(self):
        return self.profile.stages

    @property
    def min_ticket(self) -> int:
        return self.profile.min_ticket

    @property
    def max_ticket(self) -> int:
        return self.profile.max_ticket


def linkedin_url(name: str) -> str:
    """
    LinkedIn company URL derived from a fund name.

    Example:
        >>> linkedin_url("Pacífico Capital")
        'https://www.linkedin.com/company/pacifico-capital'
    """
    return LINKEDIN_URL_TEMPLATE.format(slug=slugify(name))


def geo_matches(profile: InvestorProfile, country: str) -> bool:
    return country in profile.geo


def sector_matches(profile: InvestorProfile, sector: str) -> bool:
    return sector.lower() in profile.focus.lower()


def stage_matches(profile: InvestorProfile, stage: str) -> bool:
    return stage in profile.stages


def rank_investors(
    stage: str = "Pre-seed",
    traction_score: int = 6,
    sector: str = "General",
    country: str = "LATAM",
    catalog: Iterable[InvestorProfile] = DEFAULT_INVESTOR_CATALOG,
    ticket_traction_cutoff: int = TICKET_TRACTION_CUTOFF,
) -> Tuple[RankedInvestor, ...]:
    """
    Score and rank the catalog for one assessment.

    Args:
        stage: Exact stage label; profiles without it are dropped
        traction_score: Traction segment score (0-10)
        sector: Sector label matched against each profile's focus
        country: Country label matched against each profile's geography
        catalog: Profiles to rank, in tie-break order
        ticket_traction_cutoff: Traction above this sorts by largest max ticket

    Returns:
        Every eligible investor, best match first (empty if none fit the stage)
    """
    stage, sector, country = str(stage), str(sector), str(country)

    picks: List[RankedInvestor] = []
    for profile in catalog:
        if not stage_matches(profile, stage):
            continue

        checks = (
            (geo_matches(profile, country), GEO_LABEL),
            (sector_matches(profile, sector), SECTOR_LABEL),
            (stage_matches(profile, stage), STAGE_LABEL),
        )
        held = [label for ok, label in checks if ok]

        picks.append(
            RankedInvestor(
                profile=profile,
                linkedin_url=linkedin_url(profile.name),
                match_score=len(held),
                rationale=RATIONALE_SEPARATOR.join(held) or GENERALIST_LABEL,
            )
        )

    # Four passes, weakest key first; see module docstring
    picks.sort(key=lambda pick: not geo_matches(pick.profile, country))
    picks.sort(key=lambda pick: not sector_matches(pick.profile, sector))
    if traction_score > ticket_traction_cutoff:
        picks.sort(key=lambda pick: pick.max_ticket, reverse=True)
    else:
        picks.sort(key=lambda pick: pick.min_ticket)
    picks.sort(key=lambda pick: pick.match_score, reverse=True)

    return tuple(picks)


def split_overflow(
    ranked: Tuple[RankedInvestor, ...], shown: int = SHOWN_INVESTORS
) -> Tuple[Tuple[RankedInvestor, ...], int]:
    """Split a ranking into the investors shown directly and the hidden count."""
    return tuple(ranked[:shown]), max(len(ranked) - shown, 0)
