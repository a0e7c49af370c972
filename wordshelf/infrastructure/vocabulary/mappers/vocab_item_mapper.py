"""Mapper for VocabItem ORM and domain conversion."""

from wordshelf.domain.common.value_objects import UserId, VocabItemId
from wordshelf.domain.vocabulary.entities import (
    MAX_EXAMPLES,
    DifficultyLevel,
    ExampleSentence,
    VocabItem,
)
from wordshelf.models import VocabItem as VocabItemORM


class VocabItemMapper:
    """
    Mapper for VocabItem ORM and domain conversion.

    The table stores examples in three numbered column triples. Slots without
    a sentence are dropped when loading and examples are packed from slot 1
    when saving.
    """

    def _examples_from_orm(self, orm_model: VocabItemORM) -> list[ExampleSentence]:
        examples: list[ExampleSentence] = []
        for slot in range(1, MAX_EXAMPLES + 1):
            sentence = getattr(orm_model, f"example_sentence_{slot}")
            if sentence and sentence.strip():
                examples.append(
                    ExampleSentence(
                        sentence=sentence,
                        translation=getattr(orm_model, f"example_translation_{slot}"),
                        source=getattr(orm_model, f"example_source_{slot}"),
                    )
                )
        return examples

    def _examples_to_orm(self, examples: list[ExampleSentence], orm_model: VocabItemORM) -> None:
        for slot in range(1, MAX_EXAMPLES + 1):
            example = examples[slot - 1] if slot <= len(examples) else None
            setattr(orm_model, f"example_sentence_{slot}", example.sentence if example else None)
            setattr(
                orm_model, f"example_translation_{slot}", example.translation if example else None
            )
            setattr(orm_model, f"example_source_{slot}", example.source if example else None)

    def to_domain(self, orm_model: VocabItemORM) -> VocabItem:
        """Convert ORM model to domain entity."""
        return VocabItem.create_with_id(
            id=VocabItemId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            front=orm_model.front,
            back=orm_model.back,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            phonetic=orm_model.phonetic,
            chinese_definition=orm_model.chinese_definition,
            english_definition=orm_model.english_definition,
            synonyms=list(orm_model.synonyms or []),
            antonyms=list(orm_model.antonyms or []),
            related_words=list(orm_model.related_words or []),
            image_url=orm_model.image_url,
            examples=self._examples_from_orm(orm_model),
            is_favorite=orm_model.is_favorite,
            tags=list(orm_model.tags or []),
            difficulty_level=(
                DifficultyLevel(orm_model.difficulty_level) if orm_model.difficulty_level else None
            ),
            last_reviewed_at=orm_model.last_reviewed_at,
        )

    def to_orm(
        self, domain_entity: VocabItem, orm_model: VocabItemORM | None = None
    ) -> VocabItemORM:
        """Convert domain entity to ORM model."""
        if orm_model is None:
            orm_model = VocabItemORM(
                id=domain_entity.id.value if domain_entity.id.is_persisted else None,
                user_id=domain_entity.user_id.value,
            )

        orm_model.front = domain_entity.front
        orm_model.back = domain_entity.back
        orm_model.phonetic = domain_entity.phonetic
        orm_model.chinese_definition = domain_entity.chinese_definition
        orm_model.english_definition = domain_entity.english_definition
        # New list objects so SQLAlchemy sees the JSON columns as changed
        orm_model.synonyms = list(domain_entity.synonyms)
        orm_model.antonyms = list(domain_entity.antonyms)
        orm_model.related_words = list(domain_entity.related_words)
        orm_model.image_url = domain_entity.image_url
        orm_model.is_favorite = domain_entity.is_favorite
        orm_model.tags = list(domain_entity.tags)
        orm_model.difficulty_level = (
            domain_entity.difficulty_level.value if domain_entity.difficulty_level else None
        )
        orm_model.last_reviewed_at = domain_entity.last_reviewed_at
        self._examples_to_orm(domain_entity.examples, orm_model)
        return orm_model
