"""Custom exceptions for Pitch Reviewer configuration."""

from pathlib import Path
from typing import Optional


class ConfigurationError(ValueError):
    """
    Raised when a YAML config file cannot be applied.

    The review pipeline itself never raises on malformed review text; only
    explicit configuration (threshold overrides, investor catalogs) is
    validated strictly.

    Attributes:
        message: Error description
        config_path: Config file that failed validation
        key: Offending key, when one can be named
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        key: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.key = key

        parts = [message]
        if key:
            parts.append(f"Key: {key}")
        if config_path:
            parts.append(f"Config: {config_path}")

        super().__init__("\n".join(parts))
