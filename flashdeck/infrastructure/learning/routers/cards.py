"""API routes for the cards of a flashcard set."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.cards.add_card_use_case import AddCardUseCase
from flashdeck.application.learning.use_cases.cards.remove_card_use_case import (
    RemoveCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.review_card_use_case import (
    ReviewCardUseCase,
)
from flashdeck.application.learning.use_cases.cards.update_card_use_case import (
    UpdateCardUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentUserId
from flashdeck.infrastructure.learning.routers.params import SetIdPath
from flashdeck.infrastructure.learning.routers.serializers import (
    card_to_schema,
    receipt_to_schema,
)
from flashdeck.infrastructure.learning.schemas import (
    CardCreateRequest,
    CardCreateResponse,
    CardDeleteResponse,
    CardUpdateRequest,
    CardUpdateResponse,
    ReviewRequest,
    ReviewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sets/{set_id}/cards", tags=["cards"])


@router.post("", response_model=CardCreateResponse, status_code=status.HTTP_201_CREATED)
def add_card(
    set_id: SetIdPath,
    request: CardCreateRequest,
    current_user_id: CurrentUserId,
    use_case: AddCardUseCase = Depends(inject_use_case(container.add_card_use_case)),
) -> CardCreateResponse:
    """
    Append a card to one of the caller's sets.

    Args:
        set_id: ID of the set
        request: Question and answer of the new card

    Returns:
        The created card
    """
    try:
        card = use_case.add_card(
            set_id=set_id,
            user_id=current_user_id.value,
            question=request.question,
            answer=request.answer,
        )
        return CardCreateResponse(
            success=True,
            message="Card added successfully",
            card=card_to_schema(card),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add card to set {set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/{card_id}", response_model=CardUpdateResponse, status_code=status.HTTP_200_OK)
def update_card(
    set_id: SetIdPath,
    card_id: UUID,
    request: CardUpdateRequest,
    current_user_id: CurrentUserId,
    use_case: UpdateCardUseCase = Depends(inject_use_case(container.update_card_use_case)),
) -> CardUpdateResponse:
    """
    Update a card's question and/or answer. Its review state is kept.

    Raises:
        HTTPException: 404 if the set or card does not exist, 403 if not the owner
    """
    try:
        card = use_case.update_card(
            set_id=set_id,
            user_id=current_user_id.value,
            card_id=card_id,
            question=request.question,
            answer=request.answer,
        )
        return CardUpdateResponse(
            success=True,
            message="Card updated successfully",
            card=card_to_schema(card),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update card {card_id} in set {set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{card_id}", response_model=CardDeleteResponse, status_code=status.HTTP_200_OK)
def remove_card(
    set_id: SetIdPath,
    card_id: UUID,
    current_user_id: CurrentUserId,
    use_case: RemoveCardUseCase = Depends(inject_use_case(container.remove_card_use_case)),
) -> CardDeleteResponse:
    """Remove a card from a set. The set's score is left as it was."""
    try:
        use_case.remove_card(set_id=set_id, user_id=current_user_id.value, card_id=card_id)
        return CardDeleteResponse(success=True, message="Card removed successfully")
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to remove card {card_id} from set {set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{card_id}/review", response_model=ReviewResponse, status_code=status.HTTP_200_OK
)
def review_card(
    set_id: SetIdPath,
    card_id: UUID,
    request: ReviewRequest,
    current_user_id: CurrentUserId,
    use_case: ReviewCardUseCase = Depends(inject_use_case(container.review_card_use_case)),
) -> ReviewResponse:
    """
    Record whether the caller answered a card correctly.

    Returns:
        The card's review count and the set's updated statistics
    """
    try:
        receipt = use_case.review_card(
            set_id=set_id,
            user_id=current_user_id.value,
            card_id=card_id,
            is_correct=request.is_correct,
        )
        return ReviewResponse(
            success=True,
            message="Review recorded successfully",
            review=receipt_to_schema(receipt),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to review card {card_id} in set {set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
