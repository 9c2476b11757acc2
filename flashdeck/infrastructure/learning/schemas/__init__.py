"""Learning context schemas."""

from flashdeck.infrastructure.learning.schemas.card_schemas import (
    Card,
    CardBase,
    CardCreateRequest,
    CardCreateResponse,
    CardDeleteResponse,
    CardUpdateRequest,
    CardUpdateResponse,
    ReviewReceipt,
    ReviewRequest,
    ReviewResponse,
)
from flashdeck.infrastructure.learning.schemas.flashcard_set_schemas import (
    FlashcardSetCreateRequest,
    FlashcardSetCreateResponse,
    FlashcardSetDeleteResponse,
    FlashcardSetDetail,
    FlashcardSetDetailResponse,
    FlashcardSetsListResponse,
    FlashcardSetSummary,
    FlashcardSetUpdateRequest,
    FlashcardSetUpdateResponse,
    PublicFlashcardSetsListResponse,
    PublicFlashcardSetSummary,
)

__all__ = [
    "Card",
    "CardBase",
    "CardCreateRequest",
    "CardCreateResponse",
    "CardDeleteResponse",
    "CardUpdateRequest",
    "CardUpdateResponse",
    "FlashcardSetCreateRequest",
    "FlashcardSetCreateResponse",
    "FlashcardSetDeleteResponse",
    "FlashcardSetDetail",
    "FlashcardSetDetailResponse",
    "FlashcardSetSummary",
    "FlashcardSetUpdateRequest",
    "FlashcardSetUpdateResponse",
    "FlashcardSetsListResponse",
    "PublicFlashcardSetSummary",
    "PublicFlashcardSetsListResponse",
    "ReviewReceipt",
    "ReviewRequest",
    "ReviewResponse",
]
