"""
Intake Context

Responsibilities:
- Resolves the requested locale to one of the two supported locales
- Parses the review markdown tables into segments and missing-section entries
- Infers the assessment context (sector, country, stage) from a deck file name

Owns: Review markdown parsing, locale normalization, record types for parsed reviews
Never: Adds heuristic content or makes ranking decisions
"""

from pitch_reviewer.contexts.intake.context_inference import AssessmentContext, infer_context
from pitch_reviewer.contexts.intake.language import Locale, resolve_locale
from pitch_reviewer.contexts.intake.review_data_structures import (
    Lane,
    LaneBuckets,
    MissingEntry,
    ParsedReview,
    Segment,
)
from pitch_reviewer.contexts.intake.review_parser import parse_review_file, parse_review_text

__all__ = [
    "AssessmentContext",
    "infer_context",
    "Locale",
    "resolve_locale",
    "Lane",
    "LaneBuckets",
    "MissingEntry",
    "ParsedReview",
    "Segment",
    "parse_review_file",
    "parse_review_text",
]
