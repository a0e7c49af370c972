"""Data transfer objects for learning use cases."""

from dataclasses import dataclass

from wordshelf.domain.learning.entities import Done, MasteryRecord, QuizQuestion, QuizSession


@dataclass
class QuizState:
    """A session together with what it currently presents."""

    session: QuizSession
    current: QuizQuestion | Done


@dataclass
class AnswerResult:
    """Outcome of one submitted quiz answer."""

    session: QuizSession
    question: QuizQuestion
    selected_answer: str
    is_correct: bool
    mastery: MasteryRecord
