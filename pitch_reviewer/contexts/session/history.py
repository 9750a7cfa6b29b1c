"""
Assessment history for one session.

ReviewHistory is an in-memory list, newest first, capped at HISTORY_CAPACITY.
Items serialize to plain dicts so a boundary layer can store them wherever it
likes (browser storage, a session cookie); nothing here touches disk.
"""

import secrets
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from pitch_reviewer.contexts.intake.context_inference import AssessmentContext
from pitch_reviewer.contexts.intake.language import Locale, resolve_locale
from pitch_reviewer.utils.timestamp import epoch_millis

HISTORY_CAPACITY = 200


def _context_from_dict(data: Dict[str, Any]) -> AssessmentContext:
    """Read the known context fields; unknown keys are ignored, absent ones default."""
    default = AssessmentContext()
    return AssessmentContext(
        sector=str(data.get("sector", default.sector)),
        country=str(data.get("country", default.country)),
        stage=str(data.get("stage", default.stage)),
    )


@dataclass(frozen=True)
class HistoryItem:
    """
    Snapshot of one assessment run.

    Attributes:
        id: "<ts>-<6 hex chars>"
        ts: Epoch milliseconds of the run
        locale: Locale of the generated review
        score: Overall review score (0-100)
        stage: Stage the review was generated for
        training_allowed: Whether the founder allowed training use of the deck
        summary3: Summary bullets of the run
        context: Assessment context used for matching
    """

    id: str
    ts: int
    locale: Locale
    score: int
    stage: str
    training_allowed: bool
    summary3: Tuple[str, ...]
    context: AssessmentContext = field(default_factory=AssessmentContext)
    company: Optional[str] = None
    email: Optional[str] = None
    file_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["locale"] = self.locale.value
        data["summary3"] = list(self.summary3)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryItem":
        return cls(
            id=str(data["id"]),
            ts=int(data["ts"]),
            locale=resolve_locale(data.get("locale")),
            score=int(data.get("score", 0)),
            stage=str(data.get("stage", "")),
            training_allowed=bool(data.get("training_allowed", False)),
            summary3=tuple(data.get("summary3") or ()),
            context=_context_from_dict(data.get("context") or {}),
            company=data.get("company"),
            email=data.get("email"),
            file_name=data.get("file_name"),
        )


class ReviewHistory:
    """
    Newest-first history of assessment runs.

    Attributes:
        capacity: Maximum items kept; older items drop off the end
    """

    def __init__(self, items: Iterable[HistoryItem] = (), capacity: int = HISTORY_CAPACITY):
        self.capacity = capacity
        self._items: List[HistoryItem] = list(items)[:capacity]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[HistoryItem]:
        return iter(self._items)

    @property
    def items(self) -> Tuple[HistoryItem, ...]:
        return tuple(self._items)

    def add(self, item: HistoryItem) -> HistoryItem:
        """Prepend an item, dropping the oldest beyond capacity."""
        self._items = [item, *self._items][: self.capacity]
        return item

    def record(
        self,
        assessment,
        score: int,
        stage: Optional[str] = None,
        company: Optional[str] = None,
        email: Optional[str] = None,
        file_name: Optional[str] = None,
        training_allowed: bool = True,
        moment: Optional[datetime] = None,
    ) -> HistoryItem:
        """
        Snapshot a ReviewAssessment into the history.

        Args:
            assessment: ReviewAssessment of the run
            score: Overall review score (0-100)
            stage: Stage label (defaults to the assessment context's stage)
            company: Company name, if the founder gave one
            email: Contact e-mail, if given
            file_name: Uploaded deck file name
            training_allowed: Founder's training consent
            moment: Time of the run (defaults to now)

        Returns:
            The stored HistoryItem
        """
        ts = epoch_millis(moment)
        item = HistoryItem(
            id=f"{ts}-{secrets.token_hex(3)}",
            ts=ts,
            locale=assessment.locale,
            score=score,
            stage=stage or assessment.context.stage,
            training_allowed=bool(training_allowed),
            summary3=assessment.summary,
            context=assessment.context,
            company=company or None,
            email=email or None,
            file_name=file_name,
        )
        return self.add(item)

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [item.to_dict() for item in self._items]

    @classmethod
    def from_dicts(
        cls, data: Iterable[Dict[str, Any]], capacity: int = HISTORY_CAPACITY
    ) -> "ReviewHistory":
        return cls((HistoryItem.from_dict(entry) for entry in data), capacity=capacity)
