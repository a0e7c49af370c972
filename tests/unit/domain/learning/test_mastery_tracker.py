"""Tests for MasteryTracker domain service."""

from datetime import UTC, datetime

import pytest

from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.common.value_objects import UserId, VocabItemId
from wordshelf.domain.learning.entities import MasteryRecord
from wordshelf.domain.learning.exceptions import InvalidRequiredStreakError
from wordshelf.domain.learning.services import MasteryTracker

USER = UserId(1)
ITEM = VocabItemId(7)


def _record(correct_streak: int = 0, is_learned: bool = False, review_count: int = 0):
    return MasteryRecord(
        user_id=USER,
        vocab_item_id=ITEM,
        correct_streak=correct_streak,
        is_learned=is_learned,
        review_count=review_count,
    )


def _answer(record: MasteryRecord | None, is_correct: bool, required_streak: int = 2):
    return MasteryTracker().submit_answer(
        record, is_correct, required_streak, user_id=USER, vocab_item_id=ITEM
    )


def _replay(answers: list[bool], required_streak: int) -> MasteryRecord:
    record = None
    for is_correct in answers:
        record = _answer(record, is_correct, required_streak)
    assert record is not None
    return record


class TestMasteryTracker:
    def test_first_correct_answer_creates_record(self) -> None:
        record = _answer(None, True)

        assert record.correct_streak == 1
        assert record.is_learned is False
        assert record.review_count == 1
        assert record.last_reviewed_at is not None

    def test_first_wrong_answer_creates_record(self) -> None:
        record = _answer(None, False)

        assert record.correct_streak == 0
        assert record.is_learned is False
        assert record.review_count == 1

    def test_reaching_required_streak_masters(self) -> None:
        record = _answer(_record(correct_streak=1, review_count=3), True, required_streak=2)

        assert record.correct_streak == 2
        assert record.is_learned is True
        assert record.review_count == 4

    def test_single_answer_masters_with_streak_of_one(self) -> None:
        assert _answer(None, True, required_streak=1).is_learned is True

    def test_streak_keeps_counting_after_mastery(self) -> None:
        record = _answer(_record(correct_streak=2, is_learned=True, review_count=2), True)

        assert record.correct_streak == 3
        assert record.is_learned is True

    def test_wrong_answer_demotes_mastered_item(self) -> None:
        record = _answer(_record(correct_streak=3, is_learned=True, review_count=5), False)

        assert record.correct_streak == 0
        assert record.is_learned is False
        assert record.review_count == 6

    def test_lowered_threshold_applies_to_next_correct_answer(self) -> None:
        before = _record(correct_streak=2, review_count=2)

        assert _answer(before, True, required_streak=3).is_learned is True
        assert _answer(before, True, required_streak=2).is_learned is True
        assert _answer(_record(correct_streak=1), True, required_streak=3).is_learned is False

    def test_input_record_is_not_modified(self) -> None:
        before = _record(correct_streak=1, review_count=1)

        _answer(before, True)

        assert before.correct_streak == 1
        assert before.review_count == 1

    def test_reviewed_at_is_used(self) -> None:
        reviewed_at = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)

        record = MasteryTracker().submit_answer(
            None, True, 2, user_id=USER, vocab_item_id=ITEM, reviewed_at=reviewed_at
        )

        assert record.last_reviewed_at == reviewed_at
        assert record.user_id == USER
        assert record.vocab_item_id == ITEM

    @pytest.mark.parametrize("required_streak", [0, 4, -1, True])
    def test_invalid_required_streak(self, required_streak: int) -> None:
        with pytest.raises(InvalidRequiredStreakError):
            _answer(None, True, required_streak)

    @pytest.mark.parametrize(
        ("answers", "required_streak", "streak", "learned"),
        [
            ([True, True], 2, 2, True),
            ([True, False, True], 2, 1, False),
            ([True, True, False], 2, 0, False),
            ([True, True, True], 3, 3, True),
            ([False, True, True, False, True, True, True], 3, 3, True),
            ([True, False, False, False], 1, 0, False),
        ],
    )
    def test_streak_counts_trailing_correct_answers(
        self, answers: list[bool], required_streak: int, streak: int, learned: bool
    ) -> None:
        record = _replay(answers, required_streak)

        assert record.correct_streak == streak
        assert record.is_learned is learned
        assert record.review_count == len(answers)


class TestMasteryRecord:
    def test_negative_streak_rejected(self) -> None:
        with pytest.raises(DomainError, match="negative"):
            _record(correct_streak=-1)

    def test_negative_review_count_rejected(self) -> None:
        with pytest.raises(DomainError, match="negative"):
            _record(review_count=-1)
