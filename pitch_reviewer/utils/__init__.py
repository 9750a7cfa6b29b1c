"""
Shared utilities for Pitch Reviewer.

Common functionality used across contexts:
- Logger setup
- Text normalization (diacritics, slugs, integer parsing)
- Timestamps and day stamps
- Plain-text table formatting
"""

from pitch_reviewer.utils.text_processing import clamp, slugify
from pitch_reviewer.utils.timestamp import epoch_millis, today

__all__ = ["clamp", "slugify", "epoch_millis", "today"]
