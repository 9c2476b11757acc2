"""Pydantic schemas for flashcard set API request/response validation."""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StrictBool, StringConstraints

from flashdeck.infrastructure.common.schemas import ApiModel, SuccessResponse
from flashdeck.infrastructure.learning.schemas.card_schemas import Card, CardCreateRequest

Tag = Annotated[str, StringConstraints(strip_whitespace=True, max_length=20)]


class FlashcardSetCreateRequest(ApiModel):
    """Schema for creating a flashcard set."""

    title: str = Field(..., min_length=1, max_length=100, description="Set title")
    description: str | None = Field(None, max_length=500, description="Optional description")
    category: str | None = Field(None, max_length=50, description="Category, default General")
    tags: list[Tag] | None = Field(None, description="Short labels, duplicates are dropped")
    is_public: StrictBool = Field(False, description="Whether other users can discover the set")
    cards: list[CardCreateRequest] = Field(default_factory=list, description="Initial cards")


class FlashcardSetUpdateRequest(ApiModel):
    """Schema for updating a flashcard set. Omitted fields keep their value."""

    title: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=50)
    tags: list[Tag] | None = None
    is_public: StrictBool | None = None


class FlashcardSetSummary(ApiModel):
    """Schema for a set in list views."""

    id: int
    title: str
    description: str
    card_count: int
    category: str
    tags: list[str]
    is_public: bool
    total_reviews: int
    average_score: int = Field(..., ge=0, le=100)
    created_at: datetime
    updated_at: datetime


class PublicFlashcardSetSummary(FlashcardSetSummary):
    """Schema for a public set shown to any user."""

    owner_id: int


class FlashcardSetDetail(FlashcardSetSummary):
    """Schema for a single set with all of its cards."""

    cards: list[Card]


class FlashcardSetDetailResponse(ApiModel):
    """Schema for set detail response."""

    flashcard_set: FlashcardSetDetail


class FlashcardSetsListResponse(ApiModel):
    """Schema for the owner's list of sets."""

    sets: list[FlashcardSetSummary] = Field(..., description="Sets, most recently updated first")


class PublicFlashcardSetsListResponse(ApiModel):
    """Schema for the list of public sets."""

    sets: list[PublicFlashcardSetSummary] = Field(..., description="Public sets, newest first")


class FlashcardSetCreateResponse(SuccessResponse):
    """Schema for set creation response."""

    flashcard_set: FlashcardSetDetail = Field(..., description="Created set")


class FlashcardSetUpdateResponse(SuccessResponse):
    """Schema for set update response."""

    flashcard_set: FlashcardSetSummary = Field(..., description="Updated set")


class FlashcardSetDeleteResponse(SuccessResponse):
    """Schema for set deletion response."""
