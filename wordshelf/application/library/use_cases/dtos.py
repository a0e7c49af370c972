from dataclasses import dataclass, field

from wordshelf.domain.library.entities import WordBook
from wordshelf.domain.vocabulary.entities import VocabItem


@dataclass
class WordBookDetails:
    """A word-book with its vocab items in card order."""

    book: WordBook
    vocab_items: list[VocabItem] = field(default_factory=list)
