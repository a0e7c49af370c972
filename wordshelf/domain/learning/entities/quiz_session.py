"""
Quiz session: the sequencer that walks a fixed pool of items one question at a time.
"""

import threading
import uuid
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from wordshelf.domain.common.value_objects import UserId, VocabItemId, WordBookId
from wordshelf.domain.learning.exceptions import (
    QuestionAlreadyAnsweredError,
    QuizSessionCompleteError,
)
from wordshelf.domain.vocabulary.entities import VocabItem

from .mastery_record import DEFAULT_REQUIRED_STREAK, validate_required_streak
from .quiz_question import QuizQuestion

if TYPE_CHECKING:
    from wordshelf.domain.learning.services.question_generator import QuestionGenerator


@dataclass(frozen=True)
class Done:
    """Terminal state of a session: every item has been presented."""

    total: int
    correct: int


@dataclass
class QuizSession:
    """
    An ordered run through the eligible items of a pool.

    Business Rules:
    - Membership is fixed at start: items with no example sentence or that are
      already mastered are left out
    - The cursor moves by exactly one per advance, never wraps and stops at Done
    - Each position can be answered once
    - required_streak may change between questions and applies to the next answer

    `lock` serialises the grade-then-record steps of an answer against
    concurrent requests on the same session.
    """

    id: str
    user_id: UserId
    items: tuple[VocabItem, ...]
    generator: "QuestionGenerator"
    started_at: datetime
    last_activity_at: datetime
    required_streak: int = DEFAULT_REQUIRED_STREAK
    cursor: int = 0
    word_book_id: WordBookId | None = None
    _question: QuizQuestion | None = field(default=None, init=False, repr=False)
    _results: dict[int, bool] = field(default_factory=dict, init=False, repr=False)
    lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        validate_required_streak(self.required_streak)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def is_done(self) -> bool:
        return self.cursor >= len(self.items)

    @property
    def correct_count(self) -> int:
        return sum(1 for correct in self._results.values() if correct)

    @property
    def answered_count(self) -> int:
        return len(self._results)

    def is_current_answered(self) -> bool:
        return self.cursor in self._results

    def current(self) -> QuizQuestion | Done:
        """
        Question at the cursor, or Done when the pool is exhausted.

        The question is generated once per position, so repeated calls return
        the same options in the same order.
        """
        if self.is_done:
            return Done(total=self.total, correct=self.correct_count)
        if self._question is None:
            self._question = self.generator.generate(self.items, self.items[self.cursor])
        return self._question

    def advance(self) -> "QuizSession":
        """Move to the next item. Advancing a finished session leaves it finished."""
        if not self.is_done:
            self.cursor += 1
            self._question = None
        return self

    def grade(self, answer: str) -> tuple[QuizQuestion, bool]:
        """
        Check an answer to the current question without recording it.

        Returns:
            The current question and whether the answer is correct

        Raises:
            QuizSessionCompleteError: If there is no current question
            QuestionAlreadyAnsweredError: If the current question was already answered
        """
        question = self.current()
        if isinstance(question, Done):
            raise QuizSessionCompleteError()
        if self.is_current_answered():
            raise QuestionAlreadyAnsweredError(self.cursor)
        return question, question.is_correct(answer)

    def record_answer(self, answer: str) -> tuple[QuizQuestion, bool]:
        """Grade an answer and mark the current question as answered."""
        question, is_correct = self.grade(answer)
        self._results[self.cursor] = is_correct
        return question, is_correct

    def change_required_streak(self, required_streak: int) -> None:
        """
        Raises:
            InvalidRequiredStreakError: If the value is outside 1-3
        """
        self.required_streak = validate_required_streak(required_streak)

    def touch(self, now: datetime | None = None) -> None:
        self.last_activity_at = now or datetime.now(UTC)

    def is_expired(self, timeout: timedelta, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) - self.last_activity_at > timeout

    @classmethod
    def start(
        cls,
        user_id: UserId,
        pool: Sequence[VocabItem],
        generator: "QuestionGenerator",
        mastered_item_ids: Collection[VocabItemId] = (),
        required_streak: int = DEFAULT_REQUIRED_STREAK,
        word_book_id: WordBookId | None = None,
        now: datetime | None = None,
    ) -> "QuizSession":
        """Start a session over the eligible items of pool, in pool order."""
        mastered = set(mastered_item_ids)
        eligible = tuple(
            item for item in pool if item.has_example_sentence and item.id not in mastered
        )
        started_at = now or datetime.now(UTC)
        return cls(
            id=uuid.uuid4().hex,
            user_id=user_id,
            items=eligible,
            generator=generator,
            started_at=started_at,
            last_activity_at=started_at,
            required_streak=required_streak,
            word_book_id=word_book_id,
        )
