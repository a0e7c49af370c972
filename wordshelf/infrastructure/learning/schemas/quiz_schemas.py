"""Pydantic schemas for quiz session API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from wordshelf.infrastructure.learning.schemas.mastery_schemas import MasteryRecordResponse


class QuizStartRequest(BaseModel):
    """Schema for starting a quiz session."""

    # Range is checked by the domain so that out-of-range values get a 400
    required_streak: int | None = Field(
        None, description="Correct answers in a row needed to master an item (1-3)"
    )
    word_book_id: int | None = Field(None, description="Quiz only this word-book's items")


class QuizSettingsRequest(BaseModel):
    required_streak: int = Field(
        ..., description="Correct answers in a row needed to master an item (1-3)"
    )


class QuizAnswerRequest(BaseModel):
    answer: str = Field(..., description="The selected option")


class QuizQuestion(BaseModel):
    """A fill-in-the-blank question."""

    position: int = Field(..., description="Zero-based position of the question in the session")
    vocab_item_id: int
    sentence: str = Field(..., description="Example sentence with the headword blanked out")
    translation: str | None = None
    options: list[str] = Field(..., description="Answer options in presentation order")
    answered: bool = Field(..., description="Whether the question has been answered")


class QuizSession(BaseModel):
    """Schema for the state of a quiz session."""

    id: str
    total: int = Field(..., description="Number of questions in the session")
    position: int = Field(..., description="Zero-based cursor; equals total when done")
    answered: int
    correct: int
    required_streak: int
    word_book_id: int | None = None
    is_done: bool
    started_at: datetime
    question: QuizQuestion | None = Field(None, description="Current question, absent when done")


class QuizSessionResponse(BaseModel):
    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    session: QuizSession


class QuizAnswerResponse(BaseModel):
    """Schema for the outcome of an answer."""

    success: bool = Field(..., description="Whether the answer was recorded")
    is_correct: bool
    selected_answer: str
    correct_answer: str
    mastery: MasteryRecordResponse
    session: QuizSession


class QuizEndResponse(BaseModel):
    success: bool = Field(..., description="Whether the session was ended")
    message: str = Field(..., description="Response message")
