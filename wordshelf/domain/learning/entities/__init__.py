from .mastery_record import (
    DEFAULT_REQUIRED_STREAK,
    MAX_REQUIRED_STREAK,
    MIN_REQUIRED_STREAK,
    MasteryRecord,
    validate_required_streak,
)
from .quiz_question import BLANK_TOKEN, QuizQuestion
from .quiz_session import Done, QuizSession

__all__ = [
    "BLANK_TOKEN",
    "DEFAULT_REQUIRED_STREAK",
    "MAX_REQUIRED_STREAK",
    "MIN_REQUIRED_STREAK",
    "Done",
    "MasteryRecord",
    "QuizQuestion",
    "QuizSession",
    "validate_required_streak",
]
