"""
Base class for Domain Events.

Domain Events are immutable records of something that happened inside an
aggregate, named in the past tense.

Example:
    @dataclass(frozen=True)
    class CardReviewed(DomainEvent):
        set_id: FlashcardSetId
        card_id: CardId
        is_correct: bool
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    The base fields are keyword-only so subclasses can declare required
    positional fields of their own.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to a flat dictionary suitable for structured logging."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result
