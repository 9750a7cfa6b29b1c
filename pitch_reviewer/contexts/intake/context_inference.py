"""
Assessment context inference from a deck file name.

Personalizes the review (sector, country, stage) without reading the deck
itself. Each cascade is checked top to bottom; the first match wins.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_SECTOR = "General"
DEFAULT_COUNTRY = "LATAM"
DEFAULT_STAGE = "Pre-seed"

# (pattern, label) searched as substrings of the lowercased name
SECTOR_RULES: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"fintech|bank|wallet|payments|pay|loan|credit"), "Fintech"),
    (re.compile(r"saas|b2b|erp|crm|api|dev"), "B2B SaaS"),
    (re.compile(r"market|ecom|commerce|delivery|logistic"), "Marketplace"),
    (re.compile(r"health|med|care|clinic"), "HealthTech"),
    (re.compile(r"edtech|edu|learn"), "EdTech"),
)

# Two-letter country codes only count as whole tokens ("ar" must not hit "market")
COUNTRY_RULES: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"mexic|(?<![a-z])(mex|mx)(?![a-z])"), "México"),
    (re.compile(r"brazil|brasil|(?<![a-z])br(?![a-z])"), "Brasil"),
    (re.compile(r"colom|(?<![a-z])co(?![a-z])"), "Colombia"),
    (re.compile(r"argen|(?<![a-z])ar(?![a-z])"), "Argentina"),
    (re.compile(r"chile|(?<![a-z])cl(?![a-z])"), "Chile"),
)

STAGE_RULES: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"pre[-_\s]?seed"), "Pre-seed"),
    (re.compile(r"seed"), "Seed"),
)


@dataclass(frozen=True)
class AssessmentContext:
    """Sector, country and stage of the assessed startup."""

    sector: str = DEFAULT_SECTOR
    country: str = DEFAULT_COUNTRY
    stage: str = DEFAULT_STAGE


def _first_label(rules: Tuple[Tuple[re.Pattern, str], ...], text: str, default: str) -> str:
    for pattern, label in rules:
        if pattern.search(text):
            return label
    return default


def infer_context(file_name: Optional[str] = "") -> AssessmentContext:
    """
    Infer the assessment context from a deck file name.

    Args:
        file_name: Deck file name (e.g., "fintech_mx_seed.pdf"); None is treated as ""

    Returns:
        AssessmentContext with defaults for anything not recognized

    Examples:
        >>> infer_context("PayFlow_mx_seed.pdf")
        AssessmentContext(sector='Fintech', country='México', stage='Seed')
        >>> infer_context("deck.pdf")
        AssessmentContext(sector='General', country='LATAM', stage='Pre-seed')
    """
    name = (file_name or "").lower()
    return AssessmentContext(
        sector=_first_label(SECTOR_RULES, name, DEFAULT_SECTOR),
        country=_first_label(COUNTRY_RULES, name, DEFAULT_COUNTRY),
        stage=_first_label(STAGE_RULES, name, DEFAULT_STAGE),
    )
