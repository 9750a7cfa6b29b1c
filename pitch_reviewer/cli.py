"""
Command-line interface for Pitch Reviewer.

Usage:
    pitch-review assess reviews/fintech_mx_seed.md --lang ES
    pitch-review assess review.md --sector Fintech --country México --markdown
    pitch-review investors --stage Seed --traction 8 --sector Fintech --country México
    pitch-review context PayFlow_mx_seed.pdf

Commands:
    assess     - Run the full review pipeline on a review markdown file
    investors  - Rank the investor catalog for a given context
    context    - Show the context inferred from a deck file name
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from pitch_reviewer.contexts.assessment import (
    ReviewAssessment,
    assessment_to_markdown,
    get_labels,
    load_thresholds,
)
from pitch_reviewer.contexts.assessment.logger import (
    log_assessment_result,
    setup_assessment_logger,
)
from pitch_reviewer.contexts.intake import AssessmentContext, infer_context, resolve_locale
from pitch_reviewer.contexts.matching import load_investor_catalog, rank_investors, split_overflow
from pitch_reviewer.utils.exceptions import ConfigurationError
from pitch_reviewer.utils.report_formatter import Column, TableFormatter, format_ticket_range
from pitch_reviewer.utils.timestamp import utc_now

load_dotenv()
LOGS_PATH = Path(os.getenv("PITCH_REVIEWER_LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Assess pitch-deck reviews and rank matching investors.",
    no_args_is_help=True,
)


def _investor_table(investors, labels) -> TableFormatter:
    table = TableFormatter(
        [
            Column(labels.match, 5, ">"),
            Column(labels.investor, 20),
            Column(labels.country, 13),
            Column(labels.focus, 22),
            Column(labels.check, 20),
            Column(labels.why_match, 40),
        ],
        total_width=125,
    )
    table.add_table_header().add_separator()
    for investor in investors:
        table.add_row(
            [
                f"{investor.match_score}/3",
                investor.name,
                investor.geo,
                investor.focus,
                format_ticket_range(investor.min_ticket, investor.max_ticket),
                investor.rationale,
            ]
        )
    return table


def render_assessment(assessment: ReviewAssessment) -> str:
    """Plain-text report of an assessment, in its locale."""
    labels = assessment.labels
    report = TableFormatter([Column("Segment", 24), Column("Score", 6, ">")], total_width=80)
    report.add_section_header(labels.title)
    ctx = assessment.context
    report.add_text(f"{labels.stage}: {ctx.stage} | {labels.focus}: {ctx.sector} | {labels.country}: {ctx.country}")

    report.add_blank_line().add_text(f"{labels.segments}:").add_table_header().add_separator()
    for segment in assessment.segments:
        report.add_row([segment.name, f"{segment.score}/10"])

    report.add_blank_line().add_text(f"{labels.summary}:")
    for bullet in assessment.summary:
        report.add_text(f"  - {bullet}")

    facts = assessment.key_facts
    report.add_blank_line().add_text(f"{labels.key_facts}:")
    for title, card in zip(labels.card_titles, facts.cards()):
        report.add_text(f"  {title}: {card.evaluation}")
        report.add_text(f"    {labels.from_deck}: {'; '.join(card.from_deck)}")
        report.add_text(f"    {labels.benchmark}: {card.benchmark}")
        if card.ask:
            report.add_text(f"    {labels.ask}: {card.ask}")
    report.add_text(f"  {labels.verdict}: {facts.verdict}")

    for heading, entries in (
        (labels.missing_header, assessment.missing),
        (labels.sections_missing, assessment.structural_gaps),
    ):
        if entries:
            report.add_blank_line().add_text(f"{heading}:")
            for entry in entries:
                report.add_text(f"  ! {entry.section}: {entry.why}")

    shown, hidden = assessment.top_investors()
    lines = [report.render(), "", f"{labels.investors}:", _investor_table(shown, labels).render()]
    if hidden:
        lines.append(labels.more_investors_text(hidden))
    return "\n".join(lines)


@app.command()
def assess(
    review_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Review markdown file"),
    lang: str = typer.Option("ES", "--lang", "-l", help="Output language (ES or EN)"),
    deck: Optional[str] = typer.Option(None, "--deck", help="Deck file name used to infer context"),
    sector: Optional[str] = typer.Option(None, "--sector", help="Override inferred sector"),
    country: Optional[str] = typer.Option(None, "--country", help="Override inferred country"),
    stage: Optional[str] = typer.Option(None, "--stage", help="Override inferred stage"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config with thresholds/investors"),
    markdown: bool = typer.Option(False, "--markdown", help="Print markdown instead of a text report"),
    log: bool = typer.Option(False, "--log", help="Write a session log under PITCH_REVIEWER_LOGS_PATH"),
):
    """Run the review pipeline on REVIEW_FILE and print the assessment."""
    locale = resolve_locale(lang)

    if log:
        log_dir = LOGS_PATH / f"assess_{utc_now():%Y%m%d_%H%M%S}"
        setup_assessment_logger(log_dir, locale.value)

    inferred = infer_context(deck or review_file.name)
    context = AssessmentContext(
        sector=sector or inferred.sector,
        country=country or inferred.country,
        stage=stage or inferred.stage,
    )

    try:
        thresholds = load_thresholds(config)
        catalog = load_investor_catalog(config)
    except ConfigurationError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    assessment = ReviewAssessment.from_text(
        review_file.read_text(encoding="utf-8"),
        locale=locale,
        context=context,
        thresholds=thresholds,
        catalog=catalog,
    )
    log_assessment_result(assessment)

    if not assessment.segments:
        typer.echo("WARNING: no review segments found; showing defaults", err=True)

    typer.echo(assessment_to_markdown(assessment) if markdown else render_assessment(assessment))


@app.command()
def investors(
    stage: str = typer.Option("Pre-seed", "--stage", help="Exact stage label"),
    traction: int = typer.Option(6, "--traction", help="Traction score (0-10)"),
    sector: str = typer.Option("General", "--sector", help="Sector label"),
    country: str = typer.Option("LATAM", "--country", help="Country label"),
    lang: str = typer.Option("EN", "--lang", "-l", help="Heading language (ES or EN)"),
    show: int = typer.Option(3, "--show", help="Investors shown before the overflow line"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config with thresholds/investors"),
):
    """Rank the investor catalog for a stage, traction score, sector and country."""
    labels = get_labels(lang)

    try:
        thresholds = load_thresholds(config)
        catalog = load_investor_catalog(config)
    except ConfigurationError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    ranked = rank_investors(
        stage,
        traction,
        sector,
        country,
        catalog=catalog,
        ticket_traction_cutoff=thresholds.ticket_traction_cutoff,
    )
    if not ranked:
        typer.echo(f"No investors in the catalog fund stage '{stage}'")
        raise typer.Exit(0)

    shown, hidden = split_overflow(ranked, show)
    typer.echo(_investor_table(shown, labels).render())
    for investor in shown:
        typer.echo(f"  {investor.name}: {investor.linkedin_url}")
    if hidden:
        typer.echo(labels.more_investors_text(hidden))


@app.command()
def context(deck_name: str = typer.Argument(..., help="Deck file name")):
    """Show the assessment context inferred from a deck file name."""
    inferred = infer_context(deck_name)
    typer.echo(f"sector: {inferred.sector}")
    typer.echo(f"country: {inferred.country}")
    typer.echo(f"stage: {inferred.stage}")


if __name__ == "__main__":
    app()
