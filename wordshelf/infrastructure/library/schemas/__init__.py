"""Library context schemas."""

from wordshelf.infrastructure.library.schemas.word_book_schemas import (
    WordBook,
    WordBookCard,
    WordBookCardsAddRequest,
    WordBookCardsAddResponse,
    WordBookCreateRequest,
    WordBookDeleteResponse,
    WordBookDetails,
    WordBookResponse,
    WordBooksListResponse,
    WordBookUpdateRequest,
)

__all__ = [
    "WordBook",
    "WordBookCard",
    "WordBookCardsAddRequest",
    "WordBookCardsAddResponse",
    "WordBookCreateRequest",
    "WordBookDeleteResponse",
    "WordBookDetails",
    "WordBookResponse",
    "WordBookUpdateRequest",
    "WordBooksListResponse",
]
