"""Pydantic schemas for quiz progress."""

from datetime import datetime

from pydantic import BaseModel, Field

from wordshelf.domain.learning.entities import MasteryRecord


class MasteryRecordResponse(BaseModel):
    """Quiz progress on a single vocab item."""

    vocab_item_id: int
    correct_streak: int = Field(..., ge=0, description="Correct answers in a row")
    is_learned: bool = Field(..., description="Whether the item is mastered")
    review_count: int = Field(..., ge=0, description="Answers submitted so far")
    last_reviewed_at: datetime | None = None

    @classmethod
    def from_record(cls, record: MasteryRecord) -> "MasteryRecordResponse":
        return cls(
            vocab_item_id=record.vocab_item_id.value,
            correct_streak=record.correct_streak,
            is_learned=record.is_learned,
            review_count=record.review_count,
            last_reviewed_at=record.last_reviewed_at,
        )


class MasteryResetResponse(BaseModel):
    success: bool = Field(..., description="Whether the reset was successful")
    message: str = Field(..., description="Response message")
