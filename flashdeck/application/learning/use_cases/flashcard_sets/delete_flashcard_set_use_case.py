"""Use case for deleting flashcard sets."""

import structlog

from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.application.learning.use_cases.exceptions import FlashcardSetNotFoundError
from flashdeck.domain.common.value_objects import FlashcardSetId, UserId

logger = structlog.get_logger(__name__)


class DeleteFlashcardSetUseCase:
    """Use case for deleting a flashcard set with all of its cards."""

    def __init__(
        self,
        flashcard_set_repository: FlashcardSetRepositoryProtocol,
        access_gate: SetAccessGate,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository
        self.access_gate = access_gate

    def delete_flashcard_set(self, set_id: int, user_id: int) -> None:
        """
        Delete a set the caller owns.

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            SetAccessForbiddenError: If the caller is not the owner
        """
        set_id_vo = FlashcardSetId(set_id)
        flashcard_set = self.access_gate.authorize(UserId(user_id), set_id_vo)

        deleted = self.flashcard_set_repository.delete(set_id_vo)
        if not deleted:
            raise FlashcardSetNotFoundError(set_id)

        logger.info(
            "deleted_flashcard_set",
            set_id=set_id,
            removed_cards=flashcard_set.card_count,
        )
