"""API routes for multiple-choice quiz sessions."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from wordshelf.application.learning.use_cases.quiz_use_case import QuizUseCase
from wordshelf.core import container
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.identity.entities.user import User
from wordshelf.domain.learning.entities import QuizQuestion as QuizQuestionEntity
from wordshelf.domain.learning.entities import QuizSession as QuizSessionEntity
from wordshelf.exceptions import ValidationError, WordshelfError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.dependencies import get_current_user
from wordshelf.infrastructure.learning.schemas import (
    MasteryRecordResponse,
    QuizAnswerRequest,
    QuizAnswerResponse,
    QuizEndResponse,
    QuizQuestion,
    QuizSession,
    QuizSessionResponse,
    QuizSettingsRequest,
    QuizStartRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quiz/sessions", tags=["quiz"])


def _to_schema(session: QuizSessionEntity, current: object) -> QuizSession:
    question = None
    if isinstance(current, QuizQuestionEntity):
        question = QuizQuestion(
            position=session.cursor,
            vocab_item_id=current.vocab_item_id.value,
            sentence=current.sentence,
            translation=current.translation,
            options=list(current.options),
            answered=session.is_current_answered(),
        )
    return QuizSession(
        id=session.id,
        total=session.total,
        position=session.cursor,
        answered=session.answered_count,
        correct=session.correct_count,
        required_streak=session.required_streak,
        word_book_id=session.word_book_id.value if session.word_book_id else None,
        is_done=session.is_done,
        started_at=session.started_at,
        question=question,
    )


@router.post("", response_model=QuizSessionResponse, status_code=status.HTTP_201_CREATED)
def start_quiz(
    current_user: Annotated[User, Depends(get_current_user)],
    request: QuizStartRequest | None = None,
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizSessionResponse:
    """
    Start a quiz over the user's items that are not yet mastered.

    Items without an example sentence are left out. A session with nothing
    to ask is returned already done.
    """
    request = request or QuizStartRequest()
    try:
        state = use_case.start_quiz(
            user_id=current_user.id.value,
            required_streak=request.required_streak,
            word_book_id=request.word_book_id,
        )
        return QuizSessionResponse(
            success=True,
            message="Quiz started",
            session=_to_schema(state.session, state.current),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to start quiz: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{session_id}", response_model=QuizSessionResponse, status_code=status.HTTP_200_OK)
def get_quiz(
    session_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizSessionResponse:
    """Get the session's progress and its current question."""
    try:
        state = use_case.get_quiz(session_id, current_user.id.value)
        return QuizSessionResponse(
            success=True,
            message="Quiz complete" if state.session.is_done else "Quiz in progress",
            session=_to_schema(state.session, state.current),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to get quiz session {session_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put(
    "/{session_id}/settings", response_model=QuizSessionResponse, status_code=status.HTTP_200_OK
)
def update_quiz_settings(
    session_id: str,
    request: QuizSettingsRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizSessionResponse:
    """Change the streak needed for mastery. Applies from the next answer on."""
    try:
        state = use_case.change_required_streak(
            session_id, current_user.id.value, request.required_streak
        )
        return QuizSessionResponse(
            success=True,
            message="Quiz settings updated",
            session=_to_schema(state.session, state.current),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to update quiz session {session_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{session_id}/answers", response_model=QuizAnswerResponse, status_code=status.HTTP_200_OK
)
def submit_answer(
    session_id: str,
    request: QuizAnswerRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizAnswerResponse:
    """
    Answer the current question.

    The item's quiz progress is updated and stored. The session stays on the
    question until it is advanced.
    """
    try:
        result = use_case.submit_answer(session_id, current_user.id.value, request.answer)
        return QuizAnswerResponse(
            success=True,
            is_correct=result.is_correct,
            selected_answer=result.selected_answer,
            correct_answer=result.question.correct_answer,
            mastery=MasteryRecordResponse.from_record(result.mastery),
            session=_to_schema(result.session, result.question),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to submit answer in quiz {session_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{session_id}/advance", response_model=QuizSessionResponse, status_code=status.HTTP_200_OK
)
def advance_quiz(
    session_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizSessionResponse:
    """Move to the next question. An unanswered question is skipped."""
    try:
        state = use_case.advance(session_id, current_user.id.value)
        return QuizSessionResponse(
            success=True,
            message="Quiz complete" if state.session.is_done else "Next question",
            session=_to_schema(state.session, state.current),
        )
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to advance quiz {session_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{session_id}", response_model=QuizEndResponse, status_code=status.HTTP_200_OK)
def end_quiz(
    session_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: QuizUseCase = Depends(inject_use_case(container.quiz_use_case)),
) -> QuizEndResponse:
    """Discard a quiz session. Recorded progress is kept."""
    try:
        use_case.end_quiz(session_id, current_user.id.value)
        return QuizEndResponse(success=True, message="Quiz ended")
    except (WordshelfError, DomainError, ValidationError):
        raise
    except Exception as e:
        logger.error(f"Failed to end quiz {session_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
