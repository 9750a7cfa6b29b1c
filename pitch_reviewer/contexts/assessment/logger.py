"""
Assessment context logger.

Provides logging interface for the assessment context with automatic [assess] prefix.
All assessment modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from pitch_reviewer.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[assess]"


def setup_assessment_logger(log_dir: Path, locale: str) -> Path:
    """
    Setup logger for an assessment session.

    Args:
        log_dir: Directory for this session's logs
        locale: Resolved locale, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="assess",
        log_dir=log_dir,
        extra_provenance={"Locale": locale},
    )


def _log_info(message: str) -> None:
    """Log info message with [assess] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [assess] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [assess] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [assess] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_assessment_result(assessment) -> None:
    """
    Log a one-line outline of a finished assessment.

    Args:
        assessment: ReviewAssessment from ReviewAssessment.from_text()
    """
    _log_info(f"Locale {assessment.locale.value}; context {assessment.context}")
    if not assessment.segments:
        _log_warning("No segments parsed; review output will fall back to defaults")
        return

    _log_success(
        f"Assessed {len(assessment.segments)} segments "
        f"({len(assessment.structural_gaps)} structural gaps, "
        f"{len(assessment.investors)} investors ranked)"
    )
