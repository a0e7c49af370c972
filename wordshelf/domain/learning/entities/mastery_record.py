"""
Mastery record: per-user progress on a single vocab item.
"""

from dataclasses import dataclass
from datetime import datetime

from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.common.value_objects import UserId, VocabItemId
from wordshelf.domain.learning.exceptions import InvalidRequiredStreakError

MIN_REQUIRED_STREAK = 1
MAX_REQUIRED_STREAK = 3
DEFAULT_REQUIRED_STREAK = 2


def validate_required_streak(value: int) -> int:
    """
    Check a required-streak threshold.

    Raises:
        InvalidRequiredStreakError: If value is not an int in the supported range
    """
    if (
        isinstance(value, bool)
        or not isinstance(value, int)
        or not MIN_REQUIRED_STREAK <= value <= MAX_REQUIRED_STREAK
    ):
        raise InvalidRequiredStreakError(value, MIN_REQUIRED_STREAK, MAX_REQUIRED_STREAK)
    return value


@dataclass(frozen=True)
class MasteryRecord:
    """
    Quiz progress keyed by (user_id, vocab_item_id).

    Business Rules:
    - correct_streak and review_count are never negative
    - review_count grows by exactly one per submitted answer
    - is_learned (Mastered) was set by a correct answer that reached the
      required streak in force at the time
    """

    user_id: UserId
    vocab_item_id: VocabItemId
    correct_streak: int = 0
    is_learned: bool = False
    review_count: int = 0
    last_reviewed_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.correct_streak < 0:
            raise DomainError("Correct streak cannot be negative")
        if self.review_count < 0:
            raise DomainError("Review count cannot be negative")
