"""Use case for running multiple-choice quizzes."""

import random

import structlog

from wordshelf.application.learning.protocols.mastery_repository import (
    MasteryRepositoryProtocol,
)
from wordshelf.application.learning.services.quiz_session_store import QuizSessionStore
from wordshelf.application.learning.use_cases.dtos import AnswerResult, QuizState
from wordshelf.application.learning.use_cases.pool_loader import StudyPoolLoader
from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.domain.common.value_objects.ids import UserId, WordBookId
from wordshelf.domain.learning.entities import QuizSession
from wordshelf.domain.learning.services import MasteryTracker, QuestionGenerator
from wordshelf.exceptions import QuizSessionNotFoundError, VocabItemNotFoundError

logger = structlog.get_logger(__name__)


class QuizUseCase:
    """
    Starts quiz sessions, serves their questions and records answers.

    Each answer is graded, turned into a new mastery record and written back
    before the session marks the question as answered. These steps run under
    the session lock, so a question is counted once however many requests race.
    """

    def __init__(
        self,
        pool_loader: StudyPoolLoader,
        vocab_item_repository: VocabItemRepositoryProtocol,
        mastery_repository: MasteryRepositoryProtocol,
        session_store: QuizSessionStore,
        mastery_tracker: MasteryTracker,
        default_required_streak: int,
        rng: random.Random | None = None,
    ) -> None:
        self.pool_loader = pool_loader
        self.vocab_item_repository = vocab_item_repository
        self.mastery_repository = mastery_repository
        self.session_store = session_store
        self.mastery_tracker = mastery_tracker
        self.default_required_streak = default_required_streak
        self.rng = rng

    def _get_session(self, session_id: str, user_id: int) -> QuizSession:
        session = self.session_store.get(session_id, UserId(user_id))
        if session is None:
            raise QuizSessionNotFoundError(session_id)
        return session

    def start_quiz(
        self,
        user_id: int,
        required_streak: int | None = None,
        word_book_id: int | None = None,
    ) -> QuizState:
        """
        Start a quiz over the user's items that are not yet mastered.

        Args:
            user_id: ID of the user
            required_streak: Correct answers in a row needed for mastery (default from settings)
            word_book_id: Restrict the quiz to one word-book

        Raises:
            InvalidRequiredStreakError: If required_streak is out of range
            WordBookNotFoundError: If the word-book is not found
        """
        user_id_vo = UserId(user_id)
        book_id_vo = WordBookId(word_book_id) if word_book_id is not None else None

        pool = self.pool_loader.load(user_id_vo, book_id_vo)
        mastered = self.mastery_repository.find_learned_item_ids(user_id_vo)

        session = QuizSession.start(
            user_id=user_id_vo,
            pool=pool,
            generator=QuestionGenerator(self.rng or random.Random()),
            mastered_item_ids=mastered,
            required_streak=(
                required_streak if required_streak is not None else self.default_required_streak
            ),
            word_book_id=book_id_vo,
        )
        self.session_store.add(session)

        logger.info(
            "quiz_session_started",
            session_id=session.id,
            user_id=user_id,
            word_book_id=word_book_id,
            eligible=session.total,
            pool=len(pool),
        )
        return QuizState(session=session, current=session.current())

    def get_quiz(self, session_id: str, user_id: int) -> QuizState:
        """
        Raises:
            QuizSessionNotFoundError: If the session is unknown, expired or not the user's
        """
        session = self._get_session(session_id, user_id)
        with session.lock:
            current = session.current()
        return QuizState(session=session, current=current)

    def submit_answer(self, session_id: str, user_id: int, answer: str) -> AnswerResult:
        """
        Grade an answer to the current question and update the item's mastery.

        Raises:
            QuizSessionNotFoundError: If the session is not found
            QuizSessionCompleteError: If every question has been presented
            QuestionAlreadyAnsweredError: If the current question was already answered
            VocabItemNotFoundError: If the item was deleted after the quiz started
            CollaboratorUnavailableError: If the mastery record could not be stored
        """
        session = self._get_session(session_id, user_id)
        with session.lock:
            question, is_correct = session.grade(answer)

            if not self.vocab_item_repository.find_by_id(question.vocab_item_id, session.user_id):
                raise VocabItemNotFoundError(question.vocab_item_id.value)

            previous = self.mastery_repository.find(session.user_id, question.vocab_item_id)
            record = self.mastery_tracker.submit_answer(
                previous,
                is_correct,
                session.required_streak,
                user_id=session.user_id,
                vocab_item_id=question.vocab_item_id,
            )
            record = self.mastery_repository.upsert(record)
            session.record_answer(answer)

        logger.info(
            "quiz_answer_submitted",
            session_id=session_id,
            vocab_item_id=question.vocab_item_id.value,
            is_correct=is_correct,
            correct_streak=record.correct_streak,
            is_learned=record.is_learned,
        )
        return AnswerResult(
            session=session,
            question=question,
            selected_answer=answer,
            is_correct=is_correct,
            mastery=record,
        )

    def advance(self, session_id: str, user_id: int) -> QuizState:
        """
        Move to the next question. A finished session stays finished.

        Raises:
            QuizSessionNotFoundError: If the session is not found
        """
        session = self._get_session(session_id, user_id)
        with session.lock:
            current = session.advance().current()
        if session.is_done:
            logger.info(
                "quiz_session_completed",
                session_id=session_id,
                total=session.total,
                correct=session.correct_count,
            )
        return QuizState(session=session, current=current)

    def change_required_streak(
        self, session_id: str, user_id: int, required_streak: int
    ) -> QuizState:
        """
        Raises:
            QuizSessionNotFoundError: If the session is not found
            InvalidRequiredStreakError: If required_streak is out of range
        """
        session = self._get_session(session_id, user_id)
        with session.lock:
            session.change_required_streak(required_streak)

        logger.info(
            "quiz_required_streak_changed", session_id=session_id, required_streak=required_streak
        )
        return QuizState(session=session, current=session.current())

    def end_quiz(self, session_id: str, user_id: int) -> None:
        """
        Raises:
            QuizSessionNotFoundError: If the session is not found
        """
        if not self.session_store.remove(session_id, UserId(user_id)):
            raise QuizSessionNotFoundError(session_id)
        logger.info("quiz_session_ended", session_id=session_id)
