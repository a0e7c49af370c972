from .word_book import DEFAULT_TAG, WordBook
from .word_book_card import WordBookCard

__all__ = ["DEFAULT_TAG", "WordBook", "WordBookCard"]
