"""
Structural gap detection: expected review categories absent from the segments.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from pitch_reviewer.contexts.assessment.labels import get_labels
from pitch_reviewer.contexts.intake.review_data_structures import MissingEntry


@dataclass(frozen=True)
class ExpectedCategory:
    """A category a complete review should cover, matched on segment names."""

    category_id: str
    pattern: re.Pattern


# Reported in this order
EXPECTED_CATEGORIES: Tuple[ExpectedCategory, ...] = (
    ExpectedCategory("competition", re.compile(r"Competition|Competencia", re.IGNORECASE)),
    ExpectedCategory("go_to_market", re.compile(r"Go[- ]?to[- ]?Market|GTM", re.IGNORECASE)),
    ExpectedCategory("financials", re.compile(r"Financials|Proyecciones", re.IGNORECASE)),
    ExpectedCategory("product", re.compile(r"Product|Tecnolog", re.IGNORECASE)),
    ExpectedCategory("regulatory", re.compile(r"Regulatory|Regulatorio", re.IGNORECASE)),
)


def detect_structural_gaps(segment_names: Iterable[str], locale="ES") -> Tuple[MissingEntry, ...]:
    """
    List expected categories that no segment name matches.

    Args:
        segment_names: Names of the parsed segments
        locale: Any locale token

    Returns:
        Gap entries in EXPECTED_CATEGORIES order; empty when no names are given
    """
    names = tuple(segment_names)
    if not names:
        return ()

    labels = get_labels(locale)
    gaps = []
    for category in EXPECTED_CATEGORIES:
        if not any(category.pattern.search(name) for name in names):
            text = labels.gap_text(category.category_id)
            gaps.append(MissingEntry(section=text.section, why=text.why))
    return tuple(gaps)
