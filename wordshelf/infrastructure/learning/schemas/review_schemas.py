"""Pydantic schemas for the read-aloud review API."""

from pydantic import BaseModel, Field

from wordshelf.application.learning.services.read_aloud_player import LanguageMode, PlayMode


class ReviewItem(BaseModel):
    """A vocab item due for review."""

    id: int
    front: str
    back: str
    phonetic: str | None = None


class UtteranceSchema(BaseModel):
    """One line to speak."""

    text: str
    lang: str = Field(..., description="BCP 47 language tag for the speech synthesizer")
    vocab_item_id: int
    example_index: int = Field(..., description="Zero-based index of the example sentence")
    is_translation: bool


class ReviewPlaylistResponse(BaseModel):
    """Schema for the read-aloud playlist of a review."""

    play_mode: PlayMode
    language_mode: LanguageMode
    items: list[ReviewItem] = Field(..., description="Items under review, in order")
    playlist: list[UtteranceSchema] = Field(..., description="Utterances to speak, in order")
