"""
Reusable patterns for review table parsing.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from pitch_reviewer.contexts.intake.review_data_structures import Lane

# =============================================================================
# TABLE STRUCTURE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ReviewTablePatterns:
    """
    Regex patterns for the pipe-delimited review tables.

    The primary table is "| Bucket | Score | Improvement |" (English) or
    "| Sección | Score | Mejora |" (Spanish). The secondary table follows a
    bold "What's missing" / "Qué falta" marker line.
    """

    # Table row: physical line starting with a pipe
    ROW: re.Pattern = re.compile(r"^\|")

    # Inline line break separating bullets inside the improvement cell
    LINE_BREAK: re.Pattern = re.compile(r"<br\s*/?>", re.IGNORECASE)

    # Category cell of header/separator rows in the primary table
    SEGMENT_HEADER_CELL: re.Pattern = re.compile(r"^(-{3,}|Bucket|Sección)", re.IGNORECASE)

    # Section cell of header/separator rows in the missing table
    MISSING_HEADER_CELL: re.Pattern = re.compile(r"^(-{3,}|Section|Sección)", re.IGNORECASE)

    # Bold marker introducing the missing table (both apostrophe variants)
    MISSING_TABLE_MARKER: re.Pattern = re.compile(r"\*\*\s*(What's|What’s|Qué)\b", re.IGNORECASE)

    # Bold emphasis stripped from bullets before classification
    BOLD: str = "**"


# Minimum cell counts after splitting on "|" (includes the empty leading cell)
MIN_SEGMENT_CELLS = 4
MIN_MISSING_CELLS = 3


# =============================================================================
# LANE CLASSIFICATION RULES
# =============================================================================


@dataclass(frozen=True)
class LaneRule:
    """A bilingual label prefix and the lane its bullets go to."""

    lane: Lane
    prefix: re.Pattern


# Evaluated in order; first match wins
LANE_RULES: Tuple[LaneRule, ...] = (
    LaneRule(Lane.GOOD, re.compile(r"^(Why:|Por qué:)\s*", re.IGNORECASE)),
    LaneRule(Lane.MISSING, re.compile(r"^(Improvement:|Mejora:)\s*", re.IGNORECASE)),
    LaneRule(
        Lane.IMPORTANCE,
        re.compile(r"^(Why investors care:|Por qué importa:)\s*", re.IGNORECASE),
    ),
    LaneRule(Lane.VALUE, re.compile(r"^(Example:|Ejemplo:)\s*", re.IGNORECASE)),
)

# Unlabeled bullets are treated as strengths
DEFAULT_LANE = Lane.GOOD


def classify_bullet(bullet: str) -> Tuple[Lane, str]:
    """
    Assign a bullet to a lane and strip its label.

    Args:
        bullet: Raw bullet text, possibly wrapped in bold markers

    Returns:
        (lane, text) where text has bold markers and the label removed

    Examples:
        >>> classify_bullet("**Mejora:** Citar fuentes")
        (<Lane.MISSING: 'missing'>, 'Citar fuentes')
        >>> classify_bullet("Clean layout")
        (<Lane.GOOD: 'good'>, 'Clean layout')
    """
    text = bullet.replace(ReviewTablePatterns.BOLD, "").strip()
    for rule in LANE_RULES:
        match = rule.prefix.match(text)
        if match:
            return rule.lane, text[match.end() :].strip()
    return DEFAULT_LANE, text


def is_table_row(line: str) -> bool:
    return bool(ReviewTablePatterns.ROW.match(line))


def split_cells(line: str) -> list[str]:
    """Split a table row on pipes and trim every cell."""
    return [cell.strip() for cell in line.split("|")]


def find_missing_table_marker(lines: list[str]) -> Optional[int]:
    """Index of the first non-row line carrying the missing-table marker, or None."""
    for index, line in enumerate(lines):
        if not is_table_row(line) and ReviewTablePatterns.MISSING_TABLE_MARKER.search(line):
            return index
    return None
