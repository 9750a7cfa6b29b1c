"""
Summary bullets: a short list of the weakest points across segments.

Used for the history snapshot and the report header.
"""

from typing import Iterable, Optional, Tuple

from pitch_reviewer.contexts.assessment.defaults import PLACEHOLDER_TEXTS, SUMMARY_BULLET_LIMIT
from pitch_reviewer.contexts.intake.review_data_structures import Lane, Segment

# Lanes probed for a segment's bullet, most actionable first
LANE_PRIORITY = (Lane.MISSING, Lane.IMPORTANCE, Lane.VALUE, Lane.GOOD)


def first_usable_text(segment: Segment) -> Optional[str]:
    """First non-placeholder entry, probing lanes in LANE_PRIORITY order."""
    for lane in LANE_PRIORITY:
        for text in segment.lanes.get(lane):
            if text not in PLACEHOLDER_TEXTS:
                return text
    return None


def derive_summary_bullets(
    segments: Iterable[Segment], limit: int = SUMMARY_BULLET_LIMIT
) -> Tuple[str, ...]:
    """
    Pick up to `limit` "<name>: <text>" bullets, weakest segments first.

    Segments are ordered by ascending score; ties keep their table order.
    Segments with no usable text are skipped without using a slot.

    Args:
        segments: Enriched segments
        limit: Maximum bullets returned

    Returns:
        Tuple of at most `limit` bullets (empty for no segments)
    """
    bullets = []
    for segment in sorted(segments, key=lambda s: s.score or 0):
        if len(bullets) >= limit:
            break
        text = first_usable_text(segment)
        if text:
            bullets.append(f"{segment.name}: {text}")
    return tuple(bullets)
