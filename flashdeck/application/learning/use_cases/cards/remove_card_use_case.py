"""Use case for removing cards."""

from uuid import UUID

import structlog

from flashdeck.application.common.events import dispatch_events
from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.domain.common.value_objects import CardId, FlashcardSetId, UserId

logger = structlog.get_logger(__name__)


class RemoveCardUseCase:
    """Use case for removing cards from a flashcard set."""

    def __init__(
        self,
        flashcard_set_repository: FlashcardSetRepositoryProtocol,
        access_gate: SetAccessGate,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository
        self.access_gate = access_gate

    def remove_card(self, set_id: int, user_id: int, card_id: UUID) -> None:
        """
        Remove a card from a set.

        The set's statistics are left as they are until the next review.

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            SetAccessForbiddenError: If the caller is not the owner
            CardNotFoundError: If the card is not in this set
        """
        flashcard_set = self.access_gate.authorize(UserId(user_id), FlashcardSetId(set_id))

        flashcard_set.remove_card(CardId(card_id))

        self.flashcard_set_repository.save(flashcard_set)
        dispatch_events(flashcard_set)

        logger.info("removed_card", set_id=set_id, card_id=str(card_id))
