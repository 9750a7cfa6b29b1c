"""
Markdown export for reviews and assessments.

review_to_markdown() exports the raw review (general assessment plus detailed
table). assessment_to_markdown() renders a structured ReviewAssessment.
"""

from typing import List, Optional

from pitch_reviewer.contexts.assessment.key_facts import KeyFactCard
from pitch_reviewer.utils.report_formatter import format_ticket_range

QUOTE_MARKER = "> "


def review_to_markdown(general: Optional[str], detailed: Optional[str]) -> str:
    """
    Export a review as a standalone markdown document.

    Quote markers ("> ") are removed from the general assessment.

    Args:
        general: General assessment text (blockquoted markdown)
        detailed: Detailed review tables

    Returns:
        Markdown document, or "" when there is no review at all
    """
    if general is None and detailed is None:
        return ""
    general_text = (general or "").replace(QUOTE_MARKER, "")
    return f"# Pitch-Deck Review\n\n{general_text}\n\n{detailed or ''}"


def _format_card_markdown(title: str, card: KeyFactCard, labels) -> List[str]:
    parts = [f"### {title}", ""]
    parts.append(f"- **{labels.from_deck}:** {'; '.join(card.from_deck)}")
    parts.append(f"- **{labels.evaluation}:** {card.evaluation}")
    parts.append(f"- **{labels.benchmark}:** {card.benchmark}")
    if card.ask:
        parts.append(f"- **{labels.ask}:** {card.ask}")
    parts.append("")
    return parts


def assessment_to_markdown(assessment) -> str:
    """
    Render a ReviewAssessment as markdown.

    Sections: summary, key facts, segments (with lanes), the review's own
    missing table, structural gaps and the top investors.

    Args:
        assessment: ReviewAssessment instance

    Returns:
        Markdown text in the assessment's locale
    """
    labels = assessment.labels
    parts = [f"# {labels.title}", ""]

    if assessment.summary:
        parts.extend([f"## {labels.summary}", ""])
        parts.extend(f"- {bullet}" for bullet in assessment.summary)
        parts.append("")

    facts = assessment.key_facts
    parts.extend([f"## {labels.key_facts}", ""])
    for title, card in zip(labels.card_titles, facts.cards()):
        parts.extend(_format_card_markdown(title, card, labels))
    parts.extend([f"**{labels.verdict}:** {facts.verdict}", ""])

    parts.extend([f"## {labels.segments}", ""])
    for segment in assessment.segments:
        parts.append(f"### {segment.name} ({segment.score}/10)")
        for lane_name in ("good", "missing", "importance", "value"):
            for text in getattr(segment.lanes, lane_name):
                parts.append(f"- *{lane_name}*: {text}")
        parts.append("")

    for heading, entries in (
        (labels.missing_header, assessment.missing),
        (labels.sections_missing, assessment.structural_gaps),
    ):
        if entries:
            parts.extend([f"## {heading}", ""])
            parts.extend(f"- **{entry.section}:** {entry.why}" for entry in entries)
            parts.append("")

    shown, hidden = assessment.top_investors()
    if shown:
        parts.extend([f"## {labels.investors}", ""])
        for investor in shown:
            parts.append(
                f"- [{investor.name}]({investor.linkedin_url}) ({investor.match_score}/3) "
                f"{investor.geo} | {investor.focus} | "
                f"{format_ticket_range(investor.min_ticket, investor.max_ticket)} | {investor.rationale}"
            )
        if hidden:
            parts.append(f"- {labels.more_investors_text(hidden)}")
        parts.append("")

    return "\n".join(parts).rstrip() + "\n"
