"""
Language (locale) resolution for the Intake context.

Only two locales are representable downstream. Any input, including None,
numbers or arbitrary objects, normalizes to one of them.
"""

from enum import Enum
from typing import Any


class Locale(str, Enum):
    """Supported review locales."""

    ES = "ES"
    EN = "EN"


def resolve_locale(value: Any) -> Locale:
    """
    Normalize an arbitrary locale token.

    Returns ES when the string form starts with "es" (case-insensitive),
    EN otherwise. Never raises.

    Examples:
        >>> resolve_locale("es-MX")
        <Locale.ES: 'ES'>
        >>> resolve_locale(None)
        <Locale.EN: 'EN'>
    """
    if isinstance(value, Locale):
        return value
    if value is None:
        return Locale.EN
    return Locale.ES if str(value).upper().startswith("ES") else Locale.EN
