from dataclasses import dataclass
from datetime import datetime

from wordshelf.domain.common.entity import Entity
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.common.value_objects.ids import VocabItemId, WordBookCardId, WordBookId


@dataclass
class WordBookCard(Entity[WordBookCardId]):
    """A vocab item placed in a word-book at a given position."""

    id: WordBookCardId
    book_id: WordBookId
    vocab_item_id: VocabItemId
    position: int
    added_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.position < 0:
            raise DomainError("Card position cannot be negative")

    @classmethod
    def create(cls, book_id: WordBookId, vocab_item_id: VocabItemId, position: int) -> "WordBookCard":
        return cls(
            id=WordBookCardId.generate(),
            book_id=book_id,
            vocab_item_id=vocab_item_id,
            position=position,
        )
