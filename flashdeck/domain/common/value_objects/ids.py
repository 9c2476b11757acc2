from dataclasses import dataclass
from uuid import UUID, uuid4

from ..entity import EntityId

# Largest id the integer primary keys can hold (signed 32-bit)
MAX_INTEGER_ID = 2**31 - 1


@dataclass(frozen=True)
class UserId(EntityId):
    """Identity of a user, as issued by the identity provider."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserId must be non-negative")


@dataclass(frozen=True)
class FlashcardSetId(EntityId):
    """Strongly-typed flashcard set identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("FlashcardSetId must be non-negative")

    @property
    def is_persisted(self) -> bool:
        return self.value != 0


@dataclass(frozen=True)
class CardId(EntityId):
    """
    Card identifier.

    Cards get their id from the domain at creation, so add_card can hand the
    id back before the set is saved.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValueError("CardId must wrap a UUID")

    @classmethod
    def generate(cls) -> "CardId":
        return cls(uuid4())
