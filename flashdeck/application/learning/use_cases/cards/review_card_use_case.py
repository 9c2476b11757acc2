"""Use case for recording card reviews."""

from uuid import UUID

import structlog

from flashdeck.application.common.events import dispatch_events
from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.domain.common.value_objects import CardId, FlashcardSetId, UserId
from flashdeck.domain.learning.value_objects.review_receipt import ReviewReceipt

logger = structlog.get_logger(__name__)


class ReviewCardUseCase:
    """Use case for recording whether a card was answered correctly."""

    def __init__(
        self,
        flashcard_set_repository: FlashcardSetRepositoryProtocol,
        access_gate: SetAccessGate,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository
        self.access_gate = access_gate

    def review_card(
        self, set_id: int, user_id: int, card_id: UUID, is_correct: bool
    ) -> ReviewReceipt:
        """
        Record one review and update the set's statistics.

        Args:
            set_id: ID of the set holding the card
            user_id: ID of the caller
            card_id: ID of the reviewed card
            is_correct: Review outcome

        Returns:
            Receipt with the card's review count and the new set statistics

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            SetAccessForbiddenError: If the caller is not the owner
            CardNotFoundError: If the card is not in this set
            ConflictError: If the set was changed concurrently
        """
        flashcard_set = self.access_gate.authorize(UserId(user_id), FlashcardSetId(set_id))

        receipt = flashcard_set.record_review(CardId(card_id), is_correct)

        self.flashcard_set_repository.save(flashcard_set)
        dispatch_events(flashcard_set)

        logger.info(
            "recorded_card_review",
            set_id=set_id,
            card_id=str(card_id),
            is_correct=is_correct,
            average_score=receipt.average_score,
        )
        return receipt
