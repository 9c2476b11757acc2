"""Pydantic schemas for card API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, StrictBool

from flashdeck.infrastructure.common.schemas import ApiModel, SuccessResponse


class CardBase(ApiModel):
    """Base schema for a card."""

    question: str = Field(
        ..., min_length=1, max_length=1000, description="Question text for the card"
    )
    answer: str = Field(..., min_length=1, max_length=2000, description="Answer text for the card")


class CardCreateRequest(CardBase):
    """Schema for adding a card to a set."""


class CardUpdateRequest(ApiModel):
    """Schema for updating a card. Omitted fields keep their value."""

    question: str | None = Field(None, min_length=1, max_length=1000, description="New question")
    answer: str | None = Field(None, min_length=1, max_length=2000, description="New answer")


class Card(CardBase):
    """Schema for a card inside a set detail response."""

    id: UUID
    is_correct: bool | None = Field(
        None, description="Latest review outcome, null when never reviewed"
    )
    last_reviewed: datetime | None = None
    review_count: int = 0


class CardCreateResponse(SuccessResponse):
    """Schema for card creation response."""

    card: Card = Field(..., description="Created card")


class CardUpdateResponse(SuccessResponse):
    """Schema for card update response."""

    card: Card = Field(..., description="Updated card")


class CardDeleteResponse(SuccessResponse):
    """Schema for card deletion response."""


class ReviewRequest(ApiModel):
    """Schema for recording a review."""

    is_correct: StrictBool = Field(..., description="Whether the card was answered correctly")


class ReviewReceipt(ApiModel):
    """Schema for the outcome of a recorded review."""

    card_id: UUID
    is_correct: bool
    timestamp: datetime = Field(..., description="When the review was recorded")
    review_count: int = Field(..., description="Reviews of this card so far")
    total_reviews: int = Field(..., description="Reviews across the whole set so far")
    average_score: int = Field(..., ge=0, le=100, description="Set score after this review")


class ReviewResponse(SuccessResponse):
    """Schema for review response."""

    review: ReviewReceipt
