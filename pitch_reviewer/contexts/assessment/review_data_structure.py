"""
Review assessment data structure for the Assessment context.

Provides ReviewAssessment, the result of running the full pipeline
(parse → enrich → derive → rank) on one review document.

Pattern follows intake: the parser produces records, this class consumes them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from pitch_reviewer.contexts.assessment.defaults import (
    DEFAULT_THRESHOLDS,
    DEFAULT_TRACTION_SCORE,
    ScoringThresholds,
)
from pitch_reviewer.contexts.assessment.enricher import enrich_segments
from pitch_reviewer.contexts.assessment.key_facts import KeyFacts, derive_key_facts
from pitch_reviewer.contexts.assessment.labels import Labels, get_labels
from pitch_reviewer.contexts.assessment.logger import _log_debug
from pitch_reviewer.contexts.assessment.structural_gaps import detect_structural_gaps
from pitch_reviewer.contexts.assessment.summary import derive_summary_bullets
from pitch_reviewer.contexts.intake.context_inference import AssessmentContext, infer_context
from pitch_reviewer.contexts.intake.language import Locale, resolve_locale
from pitch_reviewer.contexts.intake.review_data_structures import (
    MissingEntry,
    ParsedReview,
    Segment,
)
from pitch_reviewer.contexts.intake.review_parser import parse_review_text
from pitch_reviewer.contexts.matching.investor_catalog import (
    DEFAULT_INVESTOR_CATALOG,
    InvestorProfile,
)
from pitch_reviewer.contexts.matching.investor_matcher import (
    RankedInvestor,
    rank_investors,
    split_overflow,
)


def traction_score_for(segments: Iterable[Segment]) -> int:
    """
    Traction score fed to investor matching.

    Uses the first segment whose name contains "traction"; a missing segment
    or a zero score falls back to DEFAULT_TRACTION_SCORE.
    """
    for segment in segments:
        if "traction" in segment.name.lower():
            return segment.score or DEFAULT_TRACTION_SCORE
    return DEFAULT_TRACTION_SCORE


@dataclass(frozen=True)
class ReviewAssessment:
    """
    Everything derived from one review document.

    Factory methods:
        from_text(text) - Run the pipeline on review markdown
        from_file(path) - Load review markdown from a file

    Attributes:
        locale: Resolved locale of all generated text
        context: Sector, country and stage used for matching
        parsed: Raw parse result (segments before enrichment, missing table)
        segments: Enriched segments
        summary: Up to three weakest-point bullets
        key_facts: Fact cards and verdict
        structural_gaps: Expected categories absent from the review
        investors: Full investor ranking
    """

    locale: Locale
    context: AssessmentContext
    parsed: ParsedReview
    segments: Tuple[Segment, ...]
    summary: Tuple[str, ...]
    key_facts: KeyFacts
    structural_gaps: Tuple[MissingEntry, ...]
    investors: Tuple[RankedInvestor, ...]

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(
        cls,
        text: Optional[str],
        locale="ES",
        context: Optional[AssessmentContext] = None,
        deck_name: Optional[str] = None,
        thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
        catalog: Iterable[InvestorProfile] = DEFAULT_INVESTOR_CATALOG,
    ) -> "ReviewAssessment":
        """
        Run the full pipeline on review markdown.

        Args:
            text: Review markdown (any string; malformed input degrades to defaults)
            locale: Any locale token
            context: Explicit assessment context (takes precedence over deck_name)
            deck_name: Deck file name used to infer the context
            thresholds: Score thresholds for key facts and ticket ordering
            catalog: Investor profiles to rank

        Returns:
            ReviewAssessment instance
        """
        resolved = resolve_locale(locale)
        context = context or infer_context(deck_name)

        parsed = parse_review_text(text)
        segments = enrich_segments(parsed.segments, resolved)
        names = [segment.name for segment in segments]

        investors = rank_investors(
            stage=context.stage,
            traction_score=traction_score_for(segments),
            sector=context.sector,
            country=context.country,
            catalog=catalog,
            ticket_traction_cutoff=thresholds.ticket_traction_cutoff,
        )
        _log_debug(f"Context {context}; {len(investors)} investors eligible")

        return cls(
            locale=resolved,
            context=context,
            parsed=parsed,
            segments=segments,
            summary=derive_summary_bullets(segments),
            key_facts=derive_key_facts(segments, resolved, thresholds),
            structural_gaps=detect_structural_gaps(names, resolved),
            investors=investors,
        )

    @classmethod
    def from_file(cls, file_path: Path, **kwargs) -> "ReviewAssessment":
        """
        Load review markdown from a file and run the pipeline.

        When no context or deck_name is given, the file name is used to
        infer the context.
        """
        file_path = Path(file_path)
        if "context" not in kwargs and "deck_name" not in kwargs:
            kwargs["deck_name"] = file_path.name
        return cls.from_text(file_path.read_text(encoding="utf-8"), **kwargs)

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    @property
    def labels(self) -> Labels:
        return get_labels(self.locale)

    @property
    def missing(self) -> Tuple[MissingEntry, ...]:
        """Rows of the review's own "what's missing" table."""
        return self.parsed.missing

    @property
    def traction_score(self) -> int:
        return traction_score_for(self.segments)

    def top_investors(self, shown: int = 3) -> Tuple[Tuple[RankedInvestor, ...], int]:
        """Top investors and the number left out (see split_overflow)."""
        return split_overflow(self.investors, shown)
