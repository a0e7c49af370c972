"""Vocabulary context schemas."""

from wordshelf.infrastructure.vocabulary.schemas.vocab_item_schemas import (
    ExampleSentence,
    VocabItem,
    VocabItemCreateRequest,
    VocabItemDeleteResponse,
    VocabItemResponse,
    VocabItemsListResponse,
    VocabItemUpdateRequest,
    WordInfoRequest,
    WordInfoResponse,
)

__all__ = [
    "ExampleSentence",
    "VocabItem",
    "VocabItemCreateRequest",
    "VocabItemDeleteResponse",
    "VocabItemResponse",
    "VocabItemUpdateRequest",
    "VocabItemsListResponse",
    "WordInfoRequest",
    "WordInfoResponse",
]
