"""API route for the AI word-info lookup."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from wordshelf.application.vocabulary.use_cases.word_info_use_case import WordInfoUseCase
from wordshelf.core import container
from wordshelf.dependencies import require_ai_enabled
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.identity.entities.user import User
from wordshelf.exceptions import ValidationError, WordshelfError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.dependencies import get_current_user
from wordshelf.infrastructure.vocabulary.schemas import WordInfoRequest, WordInfoResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vocab-items", tags=["vocab-items", "ai"])


@router.post("/word-info", response_model=WordInfoResponse, status_code=status.HTTP_200_OK)
@require_ai_enabled
async def lookup_word_info(
    request: WordInfoRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: WordInfoUseCase = Depends(inject_use_case(container.word_info_use_case)),
) -> WordInfoResponse:
    """
    Look up phonetic, definitions, related words and example sentences for a word.

    Nothing is stored. Returns 410 when AI features are disabled and 503 when
    the lookup service fails.
    """
    try:
        word = request.word.strip()
        info = await use_case.get_word_info(word)
        return WordInfoResponse.from_word_info(word, info)
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to look up word '{request.word}': {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
