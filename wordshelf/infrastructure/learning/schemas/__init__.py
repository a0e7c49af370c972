"""Learning context schemas."""

from wordshelf.infrastructure.learning.schemas.mastery_schemas import (
    MasteryRecordResponse,
    MasteryResetResponse,
)
from wordshelf.infrastructure.learning.schemas.quiz_schemas import (
    QuizAnswerRequest,
    QuizAnswerResponse,
    QuizEndResponse,
    QuizQuestion,
    QuizSession,
    QuizSessionResponse,
    QuizSettingsRequest,
    QuizStartRequest,
)
from wordshelf.infrastructure.learning.schemas.review_schemas import (
    ReviewItem,
    ReviewPlaylistResponse,
    UtteranceSchema,
)

__all__ = [
    "MasteryRecordResponse",
    "MasteryResetResponse",
    "QuizAnswerRequest",
    "QuizAnswerResponse",
    "QuizEndResponse",
    "QuizQuestion",
    "QuizSession",
    "QuizSessionResponse",
    "QuizSettingsRequest",
    "QuizStartRequest",
    "ReviewItem",
    "ReviewPlaylistResponse",
    "UtteranceSchema",
]
