"""Learning module domain exceptions."""

from flashdeck.domain.common.exceptions import EntityNotFoundError
from flashdeck.domain.common.value_objects import CardId, FlashcardSetId


class CardNotFoundError(EntityNotFoundError):
    """Raised when a card id does not belong to the set it was looked up in."""

    def __init__(self, card_id: CardId, set_id: FlashcardSetId) -> None:
        super().__init__("Card", card_id)
        self.details["set_id"] = set_id.to_primitive()
        self.card_id = card_id
        self.set_id = set_id
