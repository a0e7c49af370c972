"""Tests for the QuizSession sequencer."""

import random
from datetime import UTC, datetime, timedelta

import pytest

from wordshelf.domain.common.value_objects import UserId, VocabItemId
from wordshelf.domain.learning.entities import Done, QuizQuestion, QuizSession
from wordshelf.domain.learning.exceptions import (
    InvalidRequiredStreakError,
    QuestionAlreadyAnsweredError,
    QuizSessionCompleteError,
)
from wordshelf.domain.learning.services import QuestionGenerator
from wordshelf.domain.vocabulary.entities import ExampleSentence, VocabItem


def _item(id: int, front: str, with_example: bool = True) -> VocabItem:
    now = datetime.now(UTC)
    return VocabItem.create_with_id(
        id=VocabItemId(id),
        user_id=UserId(1),
        front=front,
        back=f"meaning of {front}",
        created_at=now,
        updated_at=now,
        examples=[ExampleSentence(sentence=f"Say {front} twice.")] if with_example else [],
    )


def _start(pool: list[VocabItem], **kwargs: object) -> QuizSession:
    return QuizSession.start(
        user_id=UserId(1),
        pool=pool,
        generator=QuestionGenerator(random.Random(0)),
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.fixture
def pool() -> list[VocabItem]:
    return [_item(1, "apple"), _item(2, "river"), _item(3, "candle"), _item(4, "ladder")]


class TestQuizSessionStart:
    def test_keeps_pool_order(self, pool: list[VocabItem]) -> None:
        session = _start(pool)

        assert [item.front for item in session.items] == ["apple", "river", "candle", "ladder"]
        assert session.cursor == 0
        assert session.total == 4
        assert session.is_done is False

    def test_excludes_items_without_examples(self, pool: list[VocabItem]) -> None:
        session = _start([*pool, _item(5, "orphan", with_example=False)])

        assert session.total == 4
        assert all(item.front != "orphan" for item in session.items)

    def test_excludes_mastered_items(self, pool: list[VocabItem]) -> None:
        session = _start(pool, mastered_item_ids={VocabItemId(2), VocabItemId(4)})

        assert [item.front for item in session.items] == ["apple", "candle"]

    def test_empty_pool_is_done(self) -> None:
        session = _start([])

        assert session.is_done is True
        assert session.current() == Done(total=0, correct=0)

    def test_invalid_required_streak(self, pool: list[VocabItem]) -> None:
        with pytest.raises(InvalidRequiredStreakError):
            _start(pool, required_streak=0)

    def test_sessions_get_unique_ids(self, pool: list[VocabItem]) -> None:
        assert _start(pool).id != _start(pool).id


class TestQuizSessionProgress:
    def test_current_question_is_cached(self, pool: list[VocabItem]) -> None:
        session = _start(pool)

        first = session.current()
        again = session.current()

        assert isinstance(first, QuizQuestion)
        assert first is again
        assert first.correct_answer == "apple"

    def test_advance_moves_one_item(self, pool: list[VocabItem]) -> None:
        session = _start(pool)

        session.advance()
        question = session.current()

        assert session.cursor == 1
        assert isinstance(question, QuizQuestion)
        assert question.correct_answer == "river"

    def test_advance_past_end_stays_done(self, pool: list[VocabItem]) -> None:
        session = _start(pool)

        for _ in range(10):
            session.advance()

        assert session.cursor == 4
        assert session.is_done is True
        assert isinstance(session.current(), Done)

    def test_record_answer(self, pool: list[VocabItem]) -> None:
        session = _start(pool)

        question, is_correct = session.record_answer("apple")

        assert question.correct_answer == "apple"
        assert is_correct is True
        assert session.is_current_answered() is True
        assert session.answered_count == 1
        assert session.correct_count == 1

    def test_grade_does_not_record(self, pool: list[VocabItem]) -> None:
        session = _start(pool)

        _, is_correct = session.grade("river")

        assert is_correct is False
        assert session.answered_count == 0
        assert session.is_current_answered() is False

    def test_second_answer_rejected(self, pool: list[VocabItem]) -> None:
        session = _start(pool)
        session.record_answer("apple")

        with pytest.raises(QuestionAlreadyAnsweredError):
            session.record_answer("apple")
        assert session.answered_count == 1

    def test_answer_after_done_rejected(self, pool: list[VocabItem]) -> None:
        session = _start(pool[:1])
        session.advance()

        with pytest.raises(QuizSessionCompleteError):
            session.record_answer("apple")

    def test_done_summarizes_results(self, pool: list[VocabItem]) -> None:
        session = _start(pool)
        for answer in ["apple", "wrong", "candle"]:
            session.record_answer(answer)
            session.advance()
        session.advance()

        assert session.current() == Done(total=4, correct=2)
        assert session.answered_count == 3

    def test_change_required_streak(self, pool: list[VocabItem]) -> None:
        session = _start(pool, required_streak=2)

        session.change_required_streak(3)

        assert session.required_streak == 3
        with pytest.raises(InvalidRequiredStreakError):
            session.change_required_streak(4)
        assert session.required_streak == 3


class TestQuizSessionExpiry:
    def test_expires_after_idle_timeout(self, pool: list[VocabItem]) -> None:
        started = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)
        session = QuizSession.start(
            user_id=UserId(1), pool=pool, generator=QuestionGenerator(), now=started
        )
        timeout = timedelta(minutes=30)

        assert session.is_expired(timeout, started + timedelta(minutes=30)) is False
        assert session.is_expired(timeout, started + timedelta(minutes=31)) is True

        session.touch(started + timedelta(minutes=20))
        assert session.is_expired(timeout, started + timedelta(minutes=31)) is False
