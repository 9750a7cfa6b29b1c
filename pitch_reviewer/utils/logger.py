"""
Session log setup for command-line runs.

Library code never adds sinks on its own. `pitch-review assess --log` calls
setup_logger() once, which sends every context's prefixed messages to a
per-run file and keeps stdout free for the report.
Context-specific wrappers are defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from pitch_reviewer import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console_level: str = "WARNING",
) -> Path:
    """
    Route logging to a session file (DEBUG) and stderr (console_level and up).

    Args:
        context_name: Session name, used as the log file stem (e.g., "assess")
        log_dir: Directory for this run, created if needed
        extra_provenance: Run settings written to the session header
        console_level: Minimum level echoed to stderr

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="assess",
            log_dir=Path("outs/logs/assess_20261019_101500"),
            extra_provenance={"Locale": "ES"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_session_header(context_name, extra_provenance)

    return log_file


def log_session_header(context_name: str, settings: Optional[Dict[str, str]] = None) -> None:
    """Record the command line and run settings at the top of a session log."""
    logger.info(f"pitch-reviewer {__version__} | session: {context_name}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    for key, value in (settings or {}).items():
        logger.info(f"{key}: {value}")
