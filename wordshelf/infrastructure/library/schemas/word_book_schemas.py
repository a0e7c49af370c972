"""Pydantic schemas for word-book API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from wordshelf.infrastructure.vocabulary.schemas import VocabItem


class WordBookCreateRequest(BaseModel):
    """Schema for creating a word-book."""

    title: str = Field(..., min_length=1, max_length=255, description="Word-book title")
    description: str | None = Field(None, description="Optional description")
    tag: str | None = Field(None, max_length=100, description="Category tag (default 'general')")
    cover_image_url: str | None = Field(None, max_length=1024)


class WordBookUpdateRequest(BaseModel):
    """Schema for updating a word-book. Fields left out are unchanged."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    tag: str | None = Field(None, max_length=100)
    cover_image_url: str | None = Field(None, max_length=1024)


class WordBook(BaseModel):
    """Schema for a word-book without its cards."""

    id: int
    user_id: int
    title: str
    description: str | None = None
    tag: str | None = None
    cover_image_url: str | None = None
    card_count: int = Field(..., description="Number of cards in the book")
    created_at: datetime
    updated_at: datetime


class WordBookCard(BaseModel):
    """A card in a word-book."""

    position: int
    added_at: datetime | None = None
    vocab_item: VocabItem


class WordBookDetails(WordBook):
    """Schema for a word-book with its cards ordered by position."""

    cards: list[WordBookCard] = Field(default_factory=list)


class WordBookResponse(BaseModel):
    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    word_book: WordBook


class WordBooksListResponse(BaseModel):
    word_books: list[WordBook] = Field(..., description="Word-books, newest first")


class WordBookDeleteResponse(BaseModel):
    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class WordBookCardsAddRequest(BaseModel):
    vocab_item_ids: list[int] = Field(..., min_length=1, description="Vocab items to add, in order")


class WordBookCardsAddResponse(BaseModel):
    """Schema for the result of adding cards."""

    success: bool
    message: str
    added: int = Field(..., description="Number of cards added")
    skipped: int = Field(..., description="Items already in the book")
    word_book: WordBook
