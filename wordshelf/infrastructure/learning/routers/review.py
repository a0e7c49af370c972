"""API route for the read-aloud review playlist."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from wordshelf.application.learning.services.read_aloud_player import LanguageMode, PlayMode
from wordshelf.application.learning.use_cases.review_use_case import ReviewUseCase
from wordshelf.core import container
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.identity.entities.user import User
from wordshelf.exceptions import ValidationError, WordshelfError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.dependencies import get_current_user
from wordshelf.infrastructure.learning.schemas import (
    ReviewItem,
    ReviewPlaylistResponse,
    UtteranceSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/review", tags=["review"])


@router.get("/playlist", response_model=ReviewPlaylistResponse, status_code=status.HTTP_200_OK)
def get_review_playlist(
    current_user: Annotated[User, Depends(get_current_user)],
    play_mode: Annotated[PlayMode, Query(description="First example only, or all")] = (
        PlayMode.SINGLE
    ),
    language_mode: Annotated[
        LanguageMode, Query(description="Sentences only, or each followed by its translation")
    ] = LanguageMode.ENGLISH,
    word_book_id: Annotated[int | None, Query(description="Review one word-book")] = None,
    use_case: ReviewUseCase = Depends(inject_use_case(container.review_use_case)),
) -> ReviewPlaylistResponse:
    """
    Get the items due for review and the utterances to read aloud, in order.

    The client speaks the playlist with its own speech synthesizer.
    """
    try:
        items, playlist = use_case.get_playlist(
            user_id=current_user.id.value,
            play_mode=play_mode,
            language_mode=language_mode,
            word_book_id=word_book_id,
        )
        return ReviewPlaylistResponse(
            play_mode=play_mode,
            language_mode=language_mode,
            items=[
                ReviewItem(
                    id=item.id.value, front=item.front, back=item.back, phonetic=item.phonetic
                )
                for item in items
            ],
            playlist=[
                UtteranceSchema(
                    text=utterance.text,
                    lang=utterance.lang,
                    vocab_item_id=utterance.vocab_item_id.value,
                    example_index=utterance.example_index,
                    is_translation=utterance.is_translation,
                )
                for utterance in playlist
            ],
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to build review playlist: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
