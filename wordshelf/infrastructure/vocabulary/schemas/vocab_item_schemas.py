"""Pydantic schemas for vocab item API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from wordshelf.domain.vocabulary.entities import MAX_EXAMPLES, DifficultyLevel, WordInfo
from wordshelf.domain.vocabulary.entities import ExampleSentence as ExampleSentenceEntity
from wordshelf.infrastructure.learning.schemas.mastery_schemas import MasteryRecordResponse


class ExampleSentence(BaseModel):
    """An example sentence with its translation."""

    sentence: str = Field(..., min_length=1, description="Sentence using the headword")
    translation: str | None = Field(None, description="Translation of the sentence")
    source: str | None = Field(None, description="Where the sentence comes from")

    def to_entity(self) -> ExampleSentenceEntity:
        return ExampleSentenceEntity(
            sentence=self.sentence, translation=self.translation, source=self.source
        )

    @classmethod
    def from_entity(cls, example: ExampleSentenceEntity) -> "ExampleSentence":
        return cls(sentence=example.sentence, translation=example.translation, source=example.source)


class VocabItemBase(BaseModel):
    """Fields shared by vocab item requests and responses."""

    phonetic: str | None = Field(None, max_length=255)
    chinese_definition: str | None = None
    english_definition: str | None = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    related_words: list[str] = Field(default_factory=list)
    image_url: str | None = Field(None, max_length=1024)
    examples: list[ExampleSentence] = Field(default_factory=list, max_length=MAX_EXAMPLES)
    is_favorite: bool = False
    tags: list[str] = Field(default_factory=list)
    difficulty_level: DifficultyLevel | None = None


class VocabItemCreateRequest(VocabItemBase):
    """Schema for creating a vocab item."""

    front: str = Field(..., min_length=1, max_length=255, description="The headword")
    back: str = Field(..., min_length=1, description="Meaning shown on the back of the card")
    autofill: bool = Field(
        False, description="Look the word up and fill in the fields left empty"
    )


class VocabItemUpdateRequest(BaseModel):
    """Schema for a partial vocab item update. Only the fields sent are changed."""

    front: str | None = Field(None, min_length=1, max_length=255)
    back: str | None = Field(None, min_length=1)
    phonetic: str | None = Field(None, max_length=255)
    chinese_definition: str | None = None
    english_definition: str | None = None
    synonyms: list[str] | None = None
    antonyms: list[str] | None = None
    related_words: list[str] | None = None
    image_url: str | None = Field(None, max_length=1024)
    examples: list[ExampleSentence] | None = Field(None, max_length=MAX_EXAMPLES)
    is_favorite: bool | None = None
    tags: list[str] | None = None
    difficulty_level: DifficultyLevel | None = None


class VocabItem(VocabItemBase):
    """Schema for a vocab item response."""

    id: int
    user_id: int
    front: str
    back: str
    is_learned: bool = Field(False, description="Whether the item is mastered")
    mastery: MasteryRecordResponse | None = Field(None, description="Quiz progress, if any")
    last_reviewed_at: datetime | None = Field(None, description="Last time the card was studied")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VocabItemResponse(BaseModel):
    """Schema for a single vocab item mutation response."""

    success: bool = Field(..., description="Whether the operation was successful")
    message: str = Field(..., description="Response message")
    vocab_item: VocabItem = Field(..., description="The vocab item")


class VocabItemsListResponse(BaseModel):
    """Schema for list of vocab items response."""

    vocab_items: list[VocabItem] = Field(..., description="List of vocab items")
    total: int = Field(..., description="Number of items returned")


class VocabItemDeleteResponse(BaseModel):
    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")


class WordInfoRequest(BaseModel):
    word: str = Field(..., min_length=1, max_length=255, description="Word to look up")


class WordInfoResponse(BaseModel):
    """Schema for a word-info lookup result."""

    word: str
    phonetic: str | None = None
    chinese_definition: str | None = None
    english_definition: str | None = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    related_words: list[str] = Field(default_factory=list)
    examples: list[ExampleSentence] = Field(default_factory=list)

    @classmethod
    def from_word_info(cls, word: str, info: WordInfo) -> "WordInfoResponse":
        return cls(
            word=word,
            phonetic=info.phonetic,
            chinese_definition=info.chinese_definition,
            english_definition=info.english_definition,
            synonyms=list(info.synonyms),
            antonyms=list(info.antonyms),
            related_words=list(info.related_words),
            examples=[ExampleSentence.from_entity(example) for example in info.examples],
        )
