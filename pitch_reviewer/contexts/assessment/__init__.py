"""
Assessment Context

Responsibilities:
- Pads segment lanes with locale-specific heuristic bullets
- Derives summary bullets, key-fact cards and structural gaps
- Runs the full review pipeline (ReviewAssessment)
- Exports reviews and assessments as markdown

Owns: All user-facing review text (labels.py), scoring thresholds
Never: Parses markdown tables itself or changes investor ranking rules
"""

from pitch_reviewer.contexts.assessment.config_resolver import load_thresholds
from pitch_reviewer.contexts.assessment.defaults import DEFAULT_THRESHOLDS, ScoringThresholds
from pitch_reviewer.contexts.assessment.enricher import enrich_segments
from pitch_reviewer.contexts.assessment.key_facts import KeyFactCard, KeyFacts, derive_key_facts
from pitch_reviewer.contexts.assessment.labels import Labels, get_labels
from pitch_reviewer.contexts.assessment.markdown_formatter import (
    assessment_to_markdown,
    review_to_markdown,
)
from pitch_reviewer.contexts.assessment.review_data_structure import ReviewAssessment
from pitch_reviewer.contexts.assessment.structural_gaps import detect_structural_gaps
from pitch_reviewer.contexts.assessment.summary import derive_summary_bullets

__all__ = [
    "load_thresholds",
    "DEFAULT_THRESHOLDS",
    "ScoringThresholds",
    "enrich_segments",
    "KeyFactCard",
    "KeyFacts",
    "derive_key_facts",
    "Labels",
    "get_labels",
    "assessment_to_markdown",
    "review_to_markdown",
    "ReviewAssessment",
    "detect_structural_gaps",
    "derive_summary_bullets",
]
