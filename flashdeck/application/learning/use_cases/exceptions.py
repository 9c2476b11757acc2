"""Exceptions for learning use cases."""

from flashdeck.exceptions import ForbiddenError, NotFoundError


class FlashcardSetNotFoundError(NotFoundError):
    """Flashcard set not found error."""

    def __init__(self, set_id: int) -> None:
        self.set_id = set_id
        super().__init__(f"Flashcard set with id {set_id} not found")


class SetAccessForbiddenError(ForbiddenError):
    """The caller does not own the flashcard set."""

    def __init__(self, set_id: int) -> None:
        self.set_id = set_id
        super().__init__(f"Not allowed to access flashcard set {set_id}")
