"""
Session Context

Responsibilities:
- Keeps the per-session history of assessment runs (newest first, capped)
- Counts uploads per UTC day and reports the displayed daily total
- Fingerprints uploaded decks

Owns: All mutable state of the system, as explicit objects owned by the caller
Never: Runs the review pipeline or holds module-level mutable state
"""

from pitch_reviewer.contexts.session.history import HISTORY_CAPACITY, HistoryItem, ReviewHistory
from pitch_reviewer.contexts.session.upload_counter import (
    UploadCounter,
    fingerprint,
    scheduled_baseline,
    seeded_int,
)

__all__ = [
    "HISTORY_CAPACITY",
    "HistoryItem",
    "ReviewHistory",
    "UploadCounter",
    "fingerprint",
    "scheduled_baseline",
    "seeded_int",
]
