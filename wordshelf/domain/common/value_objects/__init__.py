"""Common value objects shared across all domain modules."""

from .ids import UserId, VocabItemId, WordBookCardId, WordBookId

__all__ = [
    "UserId",
    "VocabItemId",
    "WordBookCardId",
    "WordBookId",
]
