"""
Base class for Entities.

Entities have an identity that runs through time. Two entities are equal
when their ids are equal, whatever their other attributes hold.

Example:
    @dataclass(eq=False)
    class Card(Entity[CardId]):
        id: CardId
        question: str
        answer: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Wraps an integer (database assigned) or a UUID (domain assigned), so a
    UserId can never be passed where a FlashcardSetId is expected.
    """

    value: int | UUID

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for integer ids; the database assigns the real one."""
        return cls(0)

    def to_primitive(self) -> int | str:
        if isinstance(self.value, int):
            return self.value
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType and should be
    declared with @dataclass(eq=False) so identity equality is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
