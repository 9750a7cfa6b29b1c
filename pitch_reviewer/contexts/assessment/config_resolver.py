"""
Scoring threshold resolution.

Applies the `thresholds` section of the YAML config on top of
DEFAULT_THRESHOLDS.

Example config:
    thresholds:
      valuation_combined: 18
      traction_strong: 6
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

from pitch_reviewer.contexts.assessment.defaults import (
    DEFAULT_THRESHOLDS,
    THRESHOLD_NAMES,
    ScoringThresholds,
)
from pitch_reviewer.contexts.assessment.logger import _log_debug
from pitch_reviewer.utils.config import load_config, resolve_config_path
from pitch_reviewer.utils.exceptions import ConfigurationError


def apply_threshold_overrides(
    overrides: Dict[str, Any],
    base: ScoringThresholds = DEFAULT_THRESHOLDS,
    config_path: Optional[Path] = None,
) -> ScoringThresholds:
    """
    Return base with the given threshold values replaced.

    Raises:
        ConfigurationError: If a key is unknown or a value is not an integer
    """
    for key, value in overrides.items():
        if key not in THRESHOLD_NAMES:
            raise ConfigurationError(
                f"Unknown threshold. Available thresholds: {list(THRESHOLD_NAMES)}",
                config_path=config_path,
                key=key,
            )
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"Threshold must be an integer, got {value!r}", config_path=config_path, key=key
            )

    return replace(base, **overrides)


def load_thresholds(config_path: Optional[Path] = None) -> ScoringThresholds:
    """
    Load scoring thresholds, applying the config's `thresholds` section.

    Args:
        config_path: Optional path to YAML config (defaults to PITCH_REVIEWER_CONFIG_PATH)

    Returns:
        ScoringThresholds with overrides applied (DEFAULT_THRESHOLDS if none)
    """
    path = resolve_config_path(config_path)
    overrides = load_config(path).get("thresholds") or {}
    if not isinstance(overrides, dict):
        raise ConfigurationError("'thresholds' must be a mapping", config_path=path, key="thresholds")

    if overrides:
        _log_debug(f"Applying threshold overrides: {sorted(overrides)}")
    return apply_threshold_overrides(overrides, config_path=path)
