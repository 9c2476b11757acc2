"""Use case for adding cards to a flashcard set."""

import structlog

from flashdeck.application.common.events import dispatch_events
from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.domain.common.value_objects import FlashcardSetId, UserId
from flashdeck.domain.learning.entities.card import Card

logger = structlog.get_logger(__name__)


class AddCardUseCase:
    """Use case for adding cards to a flashcard set."""

    def __init__(
        self,
        flashcard_set_repository: FlashcardSetRepositoryProtocol,
        access_gate: SetAccessGate,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository
        self.access_gate = access_gate

    def add_card(self, set_id: int, user_id: int, question: str, answer: str) -> Card:
        """
        Append a new card to the end of a set.

        Args:
            set_id: ID of the set
            user_id: ID of the caller
            question: Question text
            answer: Answer text

        Returns:
            The created card, with its id

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            SetAccessForbiddenError: If the caller is not the owner
            ValidationError: If question or answer is empty or too long
        """
        flashcard_set = self.access_gate.authorize(UserId(user_id), FlashcardSetId(set_id))

        card = flashcard_set.add_card(question, answer)

        self.flashcard_set_repository.save(flashcard_set)
        dispatch_events(flashcard_set)

        logger.info("added_card", set_id=set_id, card_id=str(card.id))
        return card
