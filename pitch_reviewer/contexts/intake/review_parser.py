"""
Review markdown parsing for the Intake context.

Parses the scored review table and the optional "what's missing" table into
immutable records. Parsing is best-effort: malformed rows are skipped, bad
scores default to 0, and no exception is raised for any input string.

Pattern follows the rest of intake: patterns live in review_patterns.py,
records in review_data_structures.py, this module only walks lines.
"""

import re
from pathlib import Path
from typing import Iterator, Optional

from pitch_reviewer.contexts.intake.logger import _log_debug, _log_warning
from pitch_reviewer.contexts.intake.review_data_structures import (
    Lane,
    LaneBuckets,
    MissingEntry,
    ParsedReview,
    Segment,
)
from pitch_reviewer.contexts.intake.review_patterns import (
    MIN_MISSING_CELLS,
    MIN_SEGMENT_CELLS,
    ReviewTablePatterns,
    classify_bullet,
    find_missing_table_marker,
    is_table_row,
    split_cells,
)
from pitch_reviewer.utils.text_processing import clamp, parse_leading_int

SCORE_MIN = 0
SCORE_MAX = 10

LINE_SPLIT = re.compile(r"\r?\n")


def iter_table_rows(lines: list[str], start: int = 0) -> Iterator[str]:
    """
    Yield the rows of the first table found at or after start.

    Non-row lines are skipped. A blank line ends the table, but only once
    the first row has been seen, so blank lines between a marker and its
    table are tolerated.

    Args:
        lines: Physical lines of the document
        start: Index to begin scanning from

    Yields:
        Raw row lines (header and separator rows included)
    """
    started = False
    for line in lines[start:]:
        if is_table_row(line):
            started = True
            yield line
        elif not line.strip() and started:
            return


def parse_segment_row(line: str) -> Optional[Segment]:
    """
    Parse one primary-table row into a Segment.

    Returns None for header rows, separator rows and rows with too few cells.
    The improvement text is read from the second-to-last cell, so a row
    ending in "|" is handled the same as one that doesn't.
    """
    cells = split_cells(line)
    if len(cells) < MIN_SEGMENT_CELLS:
        return None
    if ReviewTablePatterns.SEGMENT_HEADER_CELL.match(cells[1]):
        return None

    name = cells[1]
    score = clamp(parse_leading_int(cells[2]), SCORE_MIN, SCORE_MAX)
    raw = cells[-2]

    bullets = [
        fragment.strip()
        for fragment in ReviewTablePatterns.LINE_BREAK.split(raw)
        if fragment.strip()
    ]

    lanes: dict[Lane, list[str]] = {lane: [] for lane in Lane}
    for bullet in bullets:
        lane, text = classify_bullet(bullet)
        lanes[lane].append(text)

    return Segment(
        name=name,
        score=score,
        lanes=LaneBuckets(**{lane.value: tuple(items) for lane, items in lanes.items()}),
    )


def parse_missing_row(line: str) -> Optional[MissingEntry]:
    """Parse one "what's missing" row; None for header/separator/short rows."""
    cells = split_cells(line)
    if len(cells) < MIN_MISSING_CELLS:
        return None
    if ReviewTablePatterns.MISSING_HEADER_CELL.match(cells[1]):
        return None
    return MissingEntry(section=cells[1], why=cells[2])


def parse_review_text(text: Optional[str]) -> ParsedReview:
    """
    Parse review markdown into segments and missing-section entries.

    This is the main parsing function.

    Args:
        text: Review markdown (None and "" yield an empty ParsedReview)

    Returns:
        ParsedReview with segments in table order and missing entries in
        "what's missing" table order
    """
    if not text:
        return ParsedReview()

    lines = LINE_SPLIT.split(str(text))
    marker_index = find_missing_table_marker(lines)

    # The primary table never extends past the missing-table marker
    primary_lines = lines if marker_index is None else lines[:marker_index]
    segments = []
    for row in iter_table_rows(primary_lines):
        segment = parse_segment_row(row)
        if segment is not None:
            segments.append(segment)

    missing = []
    if marker_index is not None:
        for row in iter_table_rows(lines, start=marker_index + 1):
            entry = parse_missing_row(row)
            if entry is not None:
                missing.append(entry)
    else:
        _log_debug("No missing-sections marker found")

    if not segments:
        _log_warning("No review table rows found")

    _log_debug(f"Parsed {len(segments)} segments and {len(missing)} missing entries")

    return ParsedReview(segments=tuple(segments), missing=tuple(missing))


def parse_review_file(file_path: Path) -> ParsedReview:
    """
    Parse review markdown from file.

    Args:
        file_path: Path to markdown file (read as UTF-8)

    Returns:
        ParsedReview with all extracted information
    """
    return parse_review_text(Path(file_path).read_text(encoding="utf-8"))
