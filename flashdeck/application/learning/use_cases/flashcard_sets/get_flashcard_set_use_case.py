"""Use case for reading a single flashcard set."""

from flashdeck.application.learning.services.set_access_gate import SetAccessGate
from flashdeck.domain.common.value_objects import FlashcardSetId, UserId
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet


class GetFlashcardSetUseCase:
    """Use case for reading a single flashcard set with its cards."""

    def __init__(self, access_gate: SetAccessGate) -> None:
        self.access_gate = access_gate

    def get_flashcard_set(self, set_id: int, user_id: int) -> FlashcardSet:
        """
        Get a set the caller owns.

        Raises:
            FlashcardSetNotFoundError: If the set does not exist
            SetAccessForbiddenError: If the caller is not the owner
        """
        return self.access_gate.authorize(UserId(user_id), FlashcardSetId(set_id))
