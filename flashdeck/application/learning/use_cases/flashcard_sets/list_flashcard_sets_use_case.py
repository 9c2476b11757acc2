"""Use case for listing flashcard sets."""

from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet


class ListFlashcardSetsUseCase:
    """Use case for the owner's list and the public list of flashcard sets."""

    def __init__(self, flashcard_set_repository: FlashcardSetRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository

    def list_for_owner(self, user_id: int) -> list[FlashcardSet]:
        """Get the caller's sets, most recently updated first."""
        return self.flashcard_set_repository.find_by_owner(UserId(user_id))

    def list_public(self) -> list[FlashcardSet]:
        """Get all public sets, newest first. Read-only view for any caller."""
        return self.flashcard_set_repository.find_public()
