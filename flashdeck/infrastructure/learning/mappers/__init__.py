from .flashcard_set_mapper import FlashcardSetMapper

__all__ = ["FlashcardSetMapper"]
