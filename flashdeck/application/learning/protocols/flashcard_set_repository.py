"""Protocol for FlashcardSet repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects import FlashcardSetId, UserId
from flashdeck.domain.learning.entities.flashcard_set import FlashcardSet


class FlashcardSetRepositoryProtocol(Protocol):
    """
    Store for whole FlashcardSet documents.

    Calls that touch the store accept an optional timeout in seconds.
    Implementations raise StoreTimeoutError when it is exceeded and
    StoreUnavailableError when the store fails, leaving stored data as it
    was before the call.
    """

    def find_by_id(
        self, set_id: FlashcardSetId, timeout: float | None = None
    ) -> FlashcardSet | None:
        """
        Load a set with all of its cards.

        No ownership filtering happens here; that is the access gate's job.

        Returns:
            FlashcardSet aggregate if found, None otherwise
        """
        ...

    def save(self, flashcard_set: FlashcardSet, timeout: float | None = None) -> FlashcardSet:
        """
        Persist the entire set (fields and cards) as one unit.

        Returns:
            Saved aggregate with database-generated values and the new version

        Raises:
            ConflictError: If the stored set changed since this one was loaded
        """
        ...

    def delete(self, set_id: FlashcardSetId, timeout: float | None = None) -> bool:
        """
        Delete a set together with all of its cards.

        Returns:
            True if deleted, False if not found
        """
        ...

    def find_by_owner(self, owner_id: UserId) -> list[FlashcardSet]:
        """
        Get all sets of one owner.

        Returns:
            List ordered by updated_at DESC
        """
        ...

    def find_public(self) -> list[FlashcardSet]:
        """
        Get every public set.

        Returns:
            List ordered by created_at DESC
        """
        ...
