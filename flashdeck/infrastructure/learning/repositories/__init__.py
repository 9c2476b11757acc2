from .flashcard_set_repository import FlashcardSetRepository

__all__ = ["FlashcardSetRepository"]
