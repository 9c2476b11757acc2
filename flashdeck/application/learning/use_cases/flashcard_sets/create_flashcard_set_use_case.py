"""Use case for creating flashcard sets."""

import structlog

from flashdeck.application.common.events import dispatch_events
from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet

logger = structlog.get_logger(__name__)


class CreateFlashcardSetUseCase:
    """Use case for creating flashcard sets."""

    def __init__(self, flashcard_set_repository: FlashcardSetRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository

    def create_flashcard_set(
        self,
        user_id: int,
        title: str,
        description: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        is_public: bool = False,
        cards: list[tuple[str, str]] | None = None,
    ) -> FlashcardSet:
        """
        Create a set owned by the caller, optionally with initial cards.

        Args:
            user_id: ID of the owner
            title: Set title
            description: Optional description
            category: Optional category, "General" when omitted
            tags: Optional tags
            is_public: Whether other users can discover the set
            cards: Optional (question, answer) pairs

        Returns:
            Created flashcard set aggregate

        Raises:
            ValidationError: If a field is out of bounds
        """
        flashcard_set = FlashcardSet.create(
            owner_id=UserId(user_id),
            title=title,
            description=description,
            category=category,
            tags=tags,
            is_public=is_public,
            cards=cards,
        )

        saved = self.flashcard_set_repository.save(flashcard_set)
        dispatch_events(flashcard_set, persisted_id=saved.id)

        logger.info(
            "created_flashcard_set",
            set_id=saved.id.value,
            user_id=user_id,
            card_count=saved.card_count,
        )
        return saved
