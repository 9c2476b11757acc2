"""Domain events raised by the FlashcardSet aggregate."""

from dataclasses import dataclass

from flashdeck.domain.common.domain_event import DomainEvent
from flashdeck.domain.common.value_objects import CardId, FlashcardSetId, UserId


@dataclass(frozen=True)
class FlashcardSetCreated(DomainEvent):
    # set_id is unknown until the first save
    owner_id: UserId
    title: str
    card_count: int


@dataclass(frozen=True)
class FlashcardSetUpdated(DomainEvent):
    set_id: FlashcardSetId
    changed_fields: tuple[str, ...]


@dataclass(frozen=True)
class CardAdded(DomainEvent):
    set_id: FlashcardSetId
    card_id: CardId


@dataclass(frozen=True)
class CardUpdated(DomainEvent):
    set_id: FlashcardSetId
    card_id: CardId


@dataclass(frozen=True)
class CardRemoved(DomainEvent):
    set_id: FlashcardSetId
    card_id: CardId


@dataclass(frozen=True)
class CardReviewed(DomainEvent):
    set_id: FlashcardSetId
    card_id: CardId
    is_correct: bool
    total_reviews: int
    average_score: int
