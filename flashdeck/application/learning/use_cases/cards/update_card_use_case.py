"""Use case for updating cards."""

from uuid import UUID

import structlog

from flashdeck.application.common.events import dispatch_events
from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.domain.common.value_objects import CardId, FlashcardSetId, UserId
from flashdeck.domain.learning.entities.card import Card
from flashdeck.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class UpdateCardUseCase:
    """Use case for updating cards."""

    def __init__(
        self,
        flashcard_set_repository: FlashcardSetRepositoryProtocol,
        access_gate: SetAccessGate,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_set_repository = flashcard_set_repository
        self.access_gate = access_gate

    def update_card(
        self,
        set_id: int,
        user_id: int,
        card_id: UUID,
        question: str | None = None,
        answer: str | None = None,
    ) -> Card:
        """
        Update a card's question and/or answer. Review state is kept.

        Args:
            set_id: ID of the set holding the card
            user_id: ID of the caller
            card_id: ID of the card
            question: New question text (optional)
            answer: New answer text (optional)

        Returns:
            Updated card

        Raises:
            ValidationError: If neither question nor answer is provided
            FlashcardSetNotFoundError: If the set does not exist
            SetAccessForbiddenError: If the caller is not the owner
            CardNotFoundError: If the card is not in this set
        """
        if question is None and answer is None:
            raise ValidationError("At least one of question or answer must be provided")

        flashcard_set = self.access_gate.authorize(UserId(user_id), FlashcardSetId(set_id))

        card_id_vo = CardId(card_id)
        current = flashcard_set.get_card(card_id_vo)
        card = flashcard_set.update_card(
            card_id_vo,
            question if question is not None else current.question,
            answer if answer is not None else current.answer,
        )

        self.flashcard_set_repository.save(flashcard_set)
        dispatch_events(flashcard_set)

        logger.info("updated_card", set_id=set_id, card_id=str(card_id))
        return card
