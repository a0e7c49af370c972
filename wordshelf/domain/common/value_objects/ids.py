from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class VocabItemId(EntityId):
    """Strongly-typed vocab item identifier."""

    value: int


@dataclass(frozen=True)
class WordBookId(EntityId):
    """Strongly-typed word-book identifier."""

    value: int


@dataclass(frozen=True)
class WordBookCardId(EntityId):
    """Strongly-typed word-book card identifier."""

    value: int
