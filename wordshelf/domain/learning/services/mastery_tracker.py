"""
Domain service for the streak-based mastery rule.

Pure: the caller persists the record it returns.
"""

from datetime import UTC, datetime

from wordshelf.domain.common.value_objects import UserId, VocabItemId
from wordshelf.domain.learning.entities.mastery_record import (
    MasteryRecord,
    validate_required_streak,
)


class MasteryTracker:
    """
    Applies one quiz answer to an item's mastery record.

    An item is Learning until a correct answer brings its streak up to the
    required streak, at which point it is Mastered. Any wrong answer resets
    the streak and returns the item to Learning, mastered or not.
    """

    def submit_answer(
        self,
        record: MasteryRecord | None,
        is_correct: bool,
        required_streak: int,
        *,
        user_id: UserId,
        vocab_item_id: VocabItemId,
        reviewed_at: datetime | None = None,
    ) -> MasteryRecord:
        """
        Compute the record that follows an answer.

        Args:
            record: Current record, or None if the item was never answered
            is_correct: Whether the answer was right
            required_streak: Consecutive correct answers needed for mastery (1-3)
            user_id: Owner of the record
            vocab_item_id: Item answered
            reviewed_at: Review timestamp, defaults to now (UTC)

        Returns:
            The new record. The input record is not modified.

        Raises:
            InvalidRequiredStreakError: If required_streak is out of range
        """
        validate_required_streak(required_streak)

        old_streak = record.correct_streak if record else 0
        old_reviews = record.review_count if record else 0

        if is_correct:
            new_streak = old_streak + 1
            is_learned = new_streak >= required_streak
        else:
            new_streak = 0
            is_learned = False

        return MasteryRecord(
            user_id=user_id,
            vocab_item_id=vocab_item_id,
            correct_streak=new_streak,
            is_learned=is_learned,
            review_count=old_reviews + 1,
            last_reviewed_at=reviewed_at or datetime.now(UTC),
        )
