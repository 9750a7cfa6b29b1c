"""
Segment enrichment with locale-specific heuristic bullets.

Each segment whose name contains a known category keyword (market, business,
traction, team, problem) gets one heuristic bullet per lane that keyword
defines, appended only while the lane holds fewer than LANE_CAPACITY entries.
"""

from dataclasses import replace
from typing import Iterable, Tuple

from pitch_reviewer.contexts.assessment.labels import EnrichmentHints, get_labels
from pitch_reviewer.contexts.assessment.logger import _log_debug
from pitch_reviewer.contexts.intake.review_data_structures import Lane, Segment


def _apply_hints(segment: Segment, hints: EnrichmentHints) -> Segment:
    lanes = segment.lanes
    lanes = lanes.padded(Lane.MISSING, [hints.missing])
    lanes = lanes.padded(Lane.IMPORTANCE, [hints.importance])
    lanes = lanes.padded(Lane.VALUE, [hints.value])
    return replace(segment, lanes=lanes)


def enrich_segment(segment: Segment, locale="ES") -> Segment:
    """
    Pad one segment's lanes with heuristic bullets.

    Args:
        segment: Parsed segment
        locale: Any locale token

    Returns:
        New Segment (equal to the input when no keyword matches)
    """
    name = segment.name.lower()
    enriched = segment
    for keyword, hints in get_labels(locale).enrichment:
        if keyword in name:
            enriched = _apply_hints(enriched, hints)
    return enriched


def enrich_segments(segments: Iterable[Segment], locale="ES") -> Tuple[Segment, ...]:
    """
    Enrich every segment, preserving order.

    Args:
        segments: Parsed segments
        locale: Any locale token (resolved to ES or EN)

    Returns:
        Tuple of enriched segments
    """
    segments = tuple(segments)
    enriched = tuple(enrich_segment(segment, locale) for segment in segments)

    changed = sum(1 for before, after in zip(segments, enriched) if before != after)
    _log_debug(f"Enriched {changed} of {len(enriched)} segments")

    return enriched
