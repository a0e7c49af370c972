"""Data transfer objects for vocabulary use cases."""

from dataclasses import dataclass, field

from wordshelf.domain.learning.entities import MasteryRecord
from wordshelf.domain.vocabulary.entities import DifficultyLevel, ExampleSentence, VocabItem


@dataclass
class VocabItemWithMastery:
    """A vocab item together with the owner's quiz progress on it."""

    vocab_item: VocabItem
    mastery: MasteryRecord | None = None

    @property
    def is_learned(self) -> bool:
        return self.mastery is not None and self.mastery.is_learned


@dataclass
class VocabItemData:
    """Attributes supplied when creating a vocab item."""

    front: str
    back: str
    phonetic: str | None = None
    chinese_definition: str | None = None
    english_definition: str | None = None
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    related_words: list[str] = field(default_factory=list)
    image_url: str | None = None
    examples: list[ExampleSentence] = field(default_factory=list)
    is_favorite: bool = False
    tags: list[str] = field(default_factory=list)
    difficulty_level: DifficultyLevel | None = None
