"""Mappers for WordBook and WordBookCard ORM and domain conversion."""

from wordshelf.domain.common.value_objects.ids import (
    UserId,
    VocabItemId,
    WordBookCardId,
    WordBookId,
)
from wordshelf.domain.library.entities import WordBook, WordBookCard
from wordshelf.models import WordBook as WordBookORM
from wordshelf.models import WordBookCard as WordBookCardORM


class WordBookCardMapper:
    def to_domain(self, orm_model: WordBookCardORM) -> WordBookCard:
        return WordBookCard(
            id=WordBookCardId(orm_model.id),
            book_id=WordBookId(orm_model.book_id),
            vocab_item_id=VocabItemId(orm_model.vocab_item_id),
            position=orm_model.position,
            added_at=orm_model.added_at,
        )

    def to_orm(self, domain_entity: WordBookCard, book_id: int) -> WordBookCardORM:
        return WordBookCardORM(
            book_id=book_id,
            vocab_item_id=domain_entity.vocab_item_id.value,
            position=domain_entity.position,
        )


class WordBookMapper:
    def __init__(self) -> None:
        self.card_mapper = WordBookCardMapper()

    def to_domain(
        self,
        orm_model: WordBookORM,
        with_cards: bool = True,
        card_count: int | None = None,
    ) -> WordBook:
        """Convert ORM model to domain entity, optionally without loading its cards."""
        cards = [self.card_mapper.to_domain(card) for card in orm_model.cards] if with_cards else []
        return WordBook.create_with_id(
            id=WordBookId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            title=orm_model.title,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            description=orm_model.description,
            cover_image_url=orm_model.cover_image_url,
            tag=orm_model.tag,
            cards=cards,
            card_count=card_count,
        )

    def to_orm(self, domain_entity: WordBook, orm_model: WordBookORM | None = None) -> WordBookORM:
        """Convert the book's own columns. Cards are synchronised by the repository."""
        if orm_model is None:
            orm_model = WordBookORM(
                id=domain_entity.id.value if domain_entity.id.is_persisted else None,
                user_id=domain_entity.user_id.value,
            )
        orm_model.title = domain_entity.title
        orm_model.description = domain_entity.description
        orm_model.cover_image_url = domain_entity.cover_image_url
        orm_model.tag = domain_entity.tag
        return orm_model
