"""Timestamp utilities."""

from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def today(moment: Optional[datetime] = None) -> str:
    """
    UTC day stamp in ISO format (YYYY-MM-DD).

    Args:
        moment: Datetime to format (defaults to now)
    """
    moment = moment or utc_now()
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%d")


def epoch_millis(moment: Optional[datetime] = None) -> int:
    """Milliseconds since the Unix epoch."""
    moment = moment or utc_now()
    return int(moment.timestamp() * 1000)
