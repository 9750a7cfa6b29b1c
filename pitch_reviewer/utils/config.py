"""
YAML config loading shared by the assessment and matching contexts.

The file path comes from an explicit argument or the PITCH_REVIEWER_CONFIG_PATH
environment variable (read through python-dotenv); without either, callers fall
back to their built-in defaults.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from loguru import logger
from omegaconf import DictConfig, OmegaConf

from pitch_reviewer.utils.exceptions import ConfigurationError

load_dotenv()
CONFIG_PATH_ENV = "PITCH_REVIEWER_CONFIG_PATH"


def resolve_config_path(config_path: Optional[Path] = None) -> Optional[Path]:
    """Explicit path first, then the environment variable, else None."""
    if config_path is not None:
        return Path(config_path)
    env_value = os.getenv(CONFIG_PATH_ENV)
    return Path(env_value) if env_value else None


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the YAML config as a plain dict.

    Args:
        config_path: Optional path (defaults to PITCH_REVIEWER_CONFIG_PATH)

    Returns:
        Resolved config dict, or {} when no config is configured

    Raises:
        ConfigurationError: If the file's top level is not a mapping
    """
    path = resolve_config_path(config_path)
    if path is None:
        return {}

    conf = OmegaConf.load(path)
    if not isinstance(conf, DictConfig):
        raise ConfigurationError("Config root must be a mapping", config_path=path)

    logger.debug(f"Loaded config from {path}")
    return OmegaConf.to_container(conf, resolve=True)
