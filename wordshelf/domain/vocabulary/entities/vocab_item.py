"""
Vocab item entity: a word entry studied on a flashcard.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from wordshelf.domain.common.entity import Entity
from wordshelf.domain.common.exceptions import ValidationError
from wordshelf.domain.common.value_objects import UserId, VocabItemId

from .example_sentence import MAX_EXAMPLES, ExampleSentence
from .word_info import WordInfo


class DifficultyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def _require_text(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name.capitalize()} cannot be empty", field=field_name)
    return value.strip()


def _validate_examples(examples: list[ExampleSentence]) -> None:
    if len(examples) > MAX_EXAMPLES:
        raise ValidationError(
            f"A vocab item holds at most {MAX_EXAMPLES} example sentences",
            field="examples",
            value=len(examples),
        )


@dataclass
class VocabItem(Entity[VocabItemId]):
    """
    A headword with its meaning and enrichment.

    Business Rules:
    - Front (the headword) and back cannot be empty
    - At most MAX_EXAMPLES example sentences
    - The headword is unique per user (enforced at repository level)
    """

    id: VocabItemId
    user_id: UserId
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
    last_reviewed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.front or not self.front.strip():
            raise ValidationError("Front cannot be empty", field="front")
        if not self.back or not self.back.strip():
            raise ValidationError("Back cannot be empty", field="back")
        _validate_examples(self.examples)

    @property
    def headword(self) -> str:
        return self.front

    @property
    def first_example(self) -> ExampleSentence | None:
        return self.examples[0] if self.examples else None

    @property
    def has_example_sentence(self) -> bool:
        return bool(self.examples)

    def update_front(self, front: str) -> None:
        self.front = _require_text(front, "front")

    def update_back(self, back: str) -> None:
        self.back = _require_text(back, "back")

    def replace_examples(self, examples: list[ExampleSentence]) -> None:
        """
        Replace all example sentences.

        Raises:
            ValidationError: If more than MAX_EXAMPLES are given
        """
        _validate_examples(examples)
        self.examples = list(examples)

    def toggle_favorite(self) -> bool:
        self.is_favorite = not self.is_favorite
        return self.is_favorite

    def mark_reviewed(self, reviewed_at: datetime | None = None) -> datetime:
        """Record that the card was studied. Quiz mastery is not affected."""
        self.last_reviewed_at = reviewed_at or datetime.now(UTC)
        return self.last_reviewed_at

    def fill_missing(self, info: WordInfo) -> None:
        """
        Copy looked-up enrichment into fields that are still empty.

        Values the user already supplied are never overwritten.
        """
        if not self.phonetic:
            self.phonetic = info.phonetic
        if not self.chinese_definition:
            self.chinese_definition = info.chinese_definition
        if not self.english_definition:
            self.english_definition = info.english_definition
        if not self.synonyms:
            self.synonyms = list(info.synonyms)
        if not self.antonyms:
            self.antonyms = list(info.antonyms)
        if not self.related_words:
            self.related_words = list(info.related_words)
        if not self.examples:
            self.examples = list(info.examples[:MAX_EXAMPLES])

    @classmethod
    def create(
        cls,
        user_id: UserId,
        front: str,
        back: str,
        **attributes: object,
    ) -> "VocabItem":
        """Create a new vocab item (ID will be 0 until persisted)."""
        return cls(
            id=VocabItemId.generate(),
            user_id=user_id,
            front=_require_text(front, "front"),
            back=_require_text(back, "back"),
            **attributes,  # type: ignore[arg-type]
        )

    @classmethod
    def create_with_id(
        cls,
        id: VocabItemId,
        user_id: UserId,
        front: str,
        back: str,
        created_at: datetime,
        updated_at: datetime,
        **attributes: object,
    ) -> "VocabItem":
        """Reconstitute a vocab item from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            front=front,
            back=back,
            created_at=created_at,
            updated_at=updated_at,
            **attributes,  # type: ignore[arg-type]
        )
