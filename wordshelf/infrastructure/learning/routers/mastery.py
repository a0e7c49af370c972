"""API routes for per-item quiz progress."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from wordshelf.application.learning.use_cases.mastery_use_case import MasteryUseCase
from wordshelf.core import container
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.identity.entities.user import User
from wordshelf.exceptions import ValidationError, WordshelfError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.dependencies import get_current_user
from wordshelf.infrastructure.learning.schemas import MasteryRecordResponse, MasteryResetResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vocab-items", tags=["mastery"])


@router.get(
    "/{vocab_item_id}/mastery",
    response_model=MasteryRecordResponse,
    status_code=status.HTTP_200_OK,
)
def get_mastery(
    vocab_item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: MasteryUseCase = Depends(inject_use_case(container.mastery_use_case)),
) -> MasteryRecordResponse:
    """Get quiz progress for an item. 404 if it has never been answered."""
    try:
        record = use_case.get_mastery(vocab_item_id, current_user.id.value)
        return MasteryRecordResponse.from_record(record)
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get mastery for {vocab_item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{vocab_item_id}/mastery",
    response_model=MasteryResetResponse,
    status_code=status.HTTP_200_OK,
)
def reset_mastery(
    vocab_item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: MasteryUseCase = Depends(inject_use_case(container.mastery_use_case)),
) -> MasteryResetResponse:
    """Put an item back into learning by discarding its quiz progress."""
    try:
        use_case.reset_mastery(vocab_item_id, current_user.id.value)
        return MasteryResetResponse(success=True, message="Progress reset")
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to reset mastery for {vocab_item_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
