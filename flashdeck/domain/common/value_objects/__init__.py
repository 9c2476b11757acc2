"""Common value objects shared across all domain modules."""

from .ids import MAX_INTEGER_ID, CardId, FlashcardSetId, UserId

__all__ = [
    "MAX_INTEGER_ID",
    "CardId",
    "FlashcardSetId",
    "UserId",
]
