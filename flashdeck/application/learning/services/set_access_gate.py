"""Ownership check every owner-only set operation goes through."""

import structlog

from flashdeck.application.learning.protocols.flashcard_set_repository import (
    FlashcardSetRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import (
    FlashcardSetNotFoundError,
    SetAccessForbiddenError,
)
from flashdeck.domain.common.value_objects import FlashcardSetId, UserId
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet

logger = structlog.get_logger(__name__)


class SetAccessGate:
    """
    Loads a set on behalf of a caller and refuses non-owners.

    Public sets get no exemption: they are readable by others only through
    the public listing, never through this gate.
    """

    def __init__(self, flashcard_set_repository: FlashcardSetRepositoryProtocol) -> None:
        self.flashcard_set_repository = flashcard_set_repository

    def authorize(
        self, caller_id: UserId, set_id: FlashcardSetId, timeout: float | None = None
    ) -> FlashcardSet:
        """
        Load a set the caller owns.

        Args:
            caller_id: Identity resolved from the request
            set_id: The set to operate on
            timeout: Seconds the store may take for the load

        Returns:
            The loaded FlashcardSet aggregate

        Raises:
            FlashcardSetNotFoundError: If no such set exists
            SetAccessForbiddenError: If the caller is not the owner
        """
        flashcard_set = self.flashcard_set_repository.find_by_id(set_id, timeout=timeout)
        if flashcard_set is None:
            raise FlashcardSetNotFoundError(set_id.value)

        if not flashcard_set.is_owned_by(caller_id):
            logger.warning(
                "flashcard_set_access_denied",
                set_id=set_id.value,
                caller_id=caller_id.value,
            )
            raise SetAccessForbiddenError(set_id.value)

        return flashcard_set
