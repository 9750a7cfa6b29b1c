"""
Daily upload counter and upload fingerprints.

The displayed "uploads today" figure is a deterministic baseline that ramps
up over the UTC day, plus a small jitter that changes every 7 minutes, plus
the real uploads counted by this process.
"""

import hashlib
from datetime import datetime, timezone
from typing import Callable, Optional

from pitch_reviewer.utils.timestamp import today, utc_now

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
UINT32_MASK = 0xFFFFFFFF

DAILY_TARGET_RANGE = (18, 55)
JITTER_RANGE = (0, 2)
JITTER_BUCKET_MINUTES = 7
MINUTES_PER_DAY = 24 * 60


def seeded_int(seed: str, low: int, high: int) -> int:
    """
    Deterministic integer in [low, high] from a string seed (32-bit FNV-1a).

    Example:
        >>> seeded_int("2026-10-19T", 18, 55) == seeded_int("2026-10-19T", 18, 55)
        True
    """
    value = FNV_OFFSET_BASIS
    for char in seed:
        value ^= ord(char)
        value = (value * FNV_PRIME) & UINT32_MASK
    fraction = value / 2**32
    return int(low + fraction * (high - low + 1))


def scheduled_baseline(moment: Optional[datetime] = None) -> int:
    """
    Baseline uploads shown for a moment of the UTC day.

    The day's target (18-55) is revealed proportionally to the minutes
    elapsed, so the figure never drops during a day.
    """
    moment = (moment or utc_now()).astimezone(timezone.utc)
    day = today(moment)
    minutes = moment.hour * 60 + moment.minute

    daily_target = seeded_int(day + "T", *DAILY_TARGET_RANGE)
    scheduled = daily_target * minutes // MINUTES_PER_DAY
    jitter = seeded_int(f"{day}:{minutes // JITTER_BUCKET_MINUTES}", *JITTER_RANGE)
    return max(0, scheduled + jitter)


class UploadCounter:
    """
    Uploads received by this process during the current UTC day.

    Resets to zero the first time it is touched on a new day.

    Attributes:
        clock: Callable returning the current aware datetime
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock
        self.day_stamp = today(clock())
        self._uploads = 0

    def _roll_day(self) -> None:
        current = today(self.clock())
        if current != self.day_stamp:
            self.day_stamp = current
            self._uploads = 0

    @property
    def uploads_today(self) -> int:
        """Real uploads counted today."""
        self._roll_day()
        return self._uploads

    def record_upload(self) -> int:
        """Count one upload; returns today's real total."""
        self._roll_day()
        self._uploads += 1
        return self._uploads

    def reported_uploads(self) -> int:
        """Displayed total: scheduled baseline plus real uploads."""
        real = self.uploads_today
        return scheduled_baseline(self.clock()) + real


def fingerprint(data: Optional[bytes] = None, moment: Optional[datetime] = None) -> str:
    """
    SHA-256 hex digest of an uploaded deck.

    Without data, a stable per-day demo fingerprint is returned instead,
    seeded with "<year>-<month>-<day>-demo" (UTC, no zero padding).
    """
    if data is None:
        moment = (moment or utc_now()).astimezone(timezone.utc)
        data = f"{moment.year}-{moment.month}-{moment.day}-demo".encode("utf-8")
    return hashlib.sha256(data).hexdigest()
