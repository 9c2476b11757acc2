"""Use case for updating flashcard set details."""

import structlog

from flashdeck.application.common.events import dispatch_events
from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.domain.common.value_objects import FlashcardSetId, UserId
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet

logger = structlog.get_logger(__name__)


class UpdateFlashcardSetUseCase:
    """Use case for updating title, description, category, tags and visibility."""

    def __init__(
        self,
        flashcard_set_repository: FlashcardSetRepositoryProtocol,
        access_gate: SetAccessGate,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository
        self.access_gate = access_gate

    def update_flashcard_set(
        self,
        set_id: int,
        user_id: int,
        title: str | None = None,
        description: str | None = None,
        category: str | None = None,
        tags: list[str] | None = None,
        is_public: bool | None = None,
    ) -> FlashcardSet:
        """
        Update the supplied fields of a set; None leaves a field as it is.

        Returns:
            Updated flashcard set aggregate

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            SetAccessForbiddenError: If the caller is not the owner
            ValidationError: If a field is out of bounds
            ConflictError: If the set was changed concurrently
        """
        flashcard_set = self.access_gate.authorize(UserId(user_id), FlashcardSetId(set_id))

        changed = flashcard_set.update_details(
            title=title,
            description=description,
            category=category,
            tags=tags,
            is_public=is_public,
        )
        if not changed:
            return flashcard_set

        saved = self.flashcard_set_repository.save(flashcard_set)
        dispatch_events(flashcard_set)

        logger.info("updated_flashcard_set", set_id=set_id, fields=changed)
        return saved
