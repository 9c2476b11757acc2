"""API routes for flashcard set management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from flashdeck.application.learning.use_cases.flashcard_sets.create_flashcard_set_use_case import (
    CreateFlashcardSetUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.delete_flashcard_set_use_case import (
    DeleteFlashcardSetUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.get_flashcard_set_use_case import (
    GetFlashcardSetUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.list_flashcard_sets_use_case import (
    ListFlashcardSetsUseCase,
)
from flashdeck.application.learning.use_cases.flashcard_sets.update_flashcard_set_use_case import (
    UpdateFlashcardSetUseCase,
)
from flashdeck.core import container
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentUserId
from flashdeck.infrastructure.learning.routers.params import SetIdPath
from flashdeck.infrastructure.learning.routers.serializers import (
    set_to_detail,
    set_to_public_summary,
    set_to_summary,
)
from flashdeck.infrastructure.learning.schemas import (
    FlashcardSetCreateRequest,
    FlashcardSetCreateResponse,
    FlashcardSetDeleteResponse,
    FlashcardSetDetailResponse,
    FlashcardSetsListResponse,
    FlashcardSetUpdateRequest,
    FlashcardSetUpdateResponse,
    PublicFlashcardSetsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sets", tags=["flashcard-sets"])


@router.get("", response_model=FlashcardSetsListResponse, status_code=status.HTTP_200_OK)
def list_flashcard_sets(
    current_user_id: CurrentUserId,
    use_case: ListFlashcardSetsUseCase = Depends(
        inject_use_case(container.list_flashcard_sets_use_case)
    ),
) -> FlashcardSetsListResponse:
    """
    List the caller's own sets, most recently updated first.

    Returns:
        Summaries of the caller's sets
    """
    try:
        sets = use_case.list_for_owner(user_id=current_user_id.value)
        return FlashcardSetsListResponse(sets=[set_to_summary(s) for s in sets])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcard sets: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/public", response_model=PublicFlashcardSetsListResponse, status_code=status.HTTP_200_OK
)
def list_public_flashcard_sets(
    current_user_id: CurrentUserId,
    use_case: ListFlashcardSetsUseCase = Depends(
        inject_use_case(container.list_flashcard_sets_use_case)
    ),
) -> PublicFlashcardSetsListResponse:
    """
    List every public set, newest first.

    Public sets are listed for discovery only; opening one still requires
    ownership.
    """
    try:
        sets = use_case.list_public()
        return PublicFlashcardSetsListResponse(sets=[set_to_public_summary(s) for s in sets])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list public flashcard sets: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=FlashcardSetCreateResponse, status_code=status.HTTP_201_CREATED)
def create_flashcard_set(
    request: FlashcardSetCreateRequest,
    current_user_id: CurrentUserId,
    use_case: CreateFlashcardSetUseCase = Depends(
        inject_use_case(container.create_flashcard_set_use_case)
    ),
) -> FlashcardSetCreateResponse:
    """
    Create a set owned by the caller, optionally with initial cards.

    Args:
        request: Set fields and initial cards

    Returns:
        The created set with its cards
    """
    try:
        flashcard_set = use_case.create_flashcard_set(
            user_id=current_user_id.value,
            title=request.title,
            description=request.description,
            category=request.category,
            tags=request.tags,
            is_public=request.is_public,
            cards=[(card.question, card.answer) for card in request.cards],
        )
        return FlashcardSetCreateResponse(
            success=True,
            message="Flashcard set created successfully",
            flashcard_set=set_to_detail(flashcard_set),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard set: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get(
    "/{set_id}", response_model=FlashcardSetDetailResponse, status_code=status.HTTP_200_OK
)
def get_flashcard_set(
    set_id: SetIdPath,
    current_user_id: CurrentUserId,
    use_case: GetFlashcardSetUseCase = Depends(
        inject_use_case(container.get_flashcard_set_use_case)
    ),
) -> FlashcardSetDetailResponse:
    """
    Get one of the caller's sets with all of its cards.

    Raises:
        HTTPException: 404 if the set does not exist, 403 if it belongs to someone else
    """
    try:
        flashcard_set = use_case.get_flashcard_set(set_id=set_id, user_id=current_user_id.value)
        return FlashcardSetDetailResponse(flashcard_set=set_to_detail(flashcard_set))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get flashcard set {set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put(
    "/{set_id}", response_model=FlashcardSetUpdateResponse, status_code=status.HTTP_200_OK
)
def update_flashcard_set(
    set_id: SetIdPath,
    request: FlashcardSetUpdateRequest,
    current_user_id: CurrentUserId,
    use_case: UpdateFlashcardSetUseCase = Depends(
        inject_use_case(container.update_flashcard_set_use_case)
    ),
) -> FlashcardSetUpdateResponse:
    """Update a set's title, description, category, tags or visibility."""
    try:
        flashcard_set = use_case.update_flashcard_set(
            set_id=set_id,
            user_id=current_user_id.value,
            title=request.title,
            description=request.description,
            category=request.category,
            tags=request.tags,
            is_public=request.is_public,
        )
        return FlashcardSetUpdateResponse(
            success=True,
            message="Flashcard set updated successfully",
            flashcard_set=set_to_summary(flashcard_set),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard set {set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{set_id}", response_model=FlashcardSetDeleteResponse, status_code=status.HTTP_200_OK
)
def delete_flashcard_set(
    set_id: SetIdPath,
    current_user_id: CurrentUserId,
    use_case: DeleteFlashcardSetUseCase = Depends(
        inject_use_case(container.delete_flashcard_set_use_case)
    ),
) -> FlashcardSetDeleteResponse:
    """Delete a set and all of its cards."""
    try:
        use_case.delete_flashcard_set(set_id=set_id, user_id=current_user_id.value)
        return FlashcardSetDeleteResponse(
            success=True,
            message="Flashcard set deleted successfully",
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard set {set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
