"""
Text processing utilities shared by the intake and matching contexts.
"""

import re
import unicodedata

LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")
NON_ALPHANUMERIC_RUN = re.compile(r"[^a-z0-9]+")


def clamp(value: int, low: int, high: int) -> int:
    """Clamp value into the closed interval [low, high]."""
    return max(low, min(high, value))


def parse_leading_int(text: str, default: int = 0) -> int:
    """
    Parse the integer at the start of a string.

    Trailing garbage is ignored ("8/10" -> 8, "7.5" -> 7), anything without a
    leading integer returns default.

    Args:
        text: Cell text
        default: Value returned when no integer prefix exists

    Returns:
        Parsed integer or default
    """
    match = LEADING_INTEGER.match(text or "")
    if not match:
        return default
    return int(match.group(1))


def strip_diacritics(text: str) -> str:
    """
    Remove combining accents from text.

    Example:
        >>> strip_diacritics("Pacífico Río")
        'Pacifico Rio'
    """
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(text: str) -> str:
    """
    Build a URL slug: no accents, lowercase, hyphen-separated alphanumeric runs.

    Example:
        >>> slugify("Río Ventures")
        'rio-ventures'
    """
    lowered = strip_diacritics(text).lower()
    return NON_ALPHANUMERIC_RUN.sub("-", lowered).strip("-")
