"""Repository for WordBook aggregates."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from wordshelf.domain.common.value_objects.ids import UserId, WordBookId
from wordshelf.domain.library.entities import WordBook
from wordshelf.exceptions import WordBookNotFoundError
from wordshelf.infrastructure.library.mappers.word_book_mapper import WordBookMapper
from wordshelf.models import WordBook as WordBookORM
from wordshelf.models import WordBookCard as WordBookCardORM


class WordBookRepository:
    """Repository for WordBook aggregates and their cards."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordBookMapper()

    def _get_orm(self, book_id: WordBookId, user_id: UserId) -> WordBookORM | None:
        stmt = (
            select(WordBookORM)
            .where(WordBookORM.id == book_id.value, WordBookORM.user_id == user_id.value)
            .options(selectinload(WordBookORM.cards))
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, book_id: WordBookId, user_id: UserId) -> WordBook | None:
        orm_model = self._get_orm(book_id, user_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self, user_id: UserId, tag: str | None = None) -> list[WordBook]:
        """
        Get the user's word-books with their card counts.

        Returns:
            Word-books ordered by created_at DESC, cards not loaded
        """
        card_count = (
            select(func.count(WordBookCardORM.id))
            .where(WordBookCardORM.book_id == WordBookORM.id)
            .correlate(WordBookORM)
            .scalar_subquery()
        )
        stmt = select(WordBookORM, card_count).where(WordBookORM.user_id == user_id.value)
        if tag is not None:
            stmt = stmt.where(WordBookORM.tag == tag)
        stmt = stmt.order_by(WordBookORM.created_at.desc(), WordBookORM.id.desc())

        return [
            self.mapper.to_domain(orm_model, with_cards=False, card_count=count)
            for orm_model, count in self.db.execute(stmt).all()
        ]

    def save(self, book: WordBook) -> WordBook:
        """
        Save a word-book and synchronise its cards with the entity.
        """
        if book.id.is_persisted:
            orm_model = self._get_orm(book.id, book.user_id)
            if not orm_model:
                raise WordBookNotFoundError(book.id.value)
            self.mapper.to_orm(book, orm_model)
        else:
            orm_model = self.mapper.to_orm(book)
            self.db.add(orm_model)
            self.db.flush()

        kept_item_ids = {card.vocab_item_id.value for card in book.cards}
        existing_item_ids = set()
        for card_orm in list(orm_model.cards):
            if card_orm.vocab_item_id not in kept_item_ids:
                orm_model.cards.remove(card_orm)
            else:
                existing_item_ids.add(card_orm.vocab_item_id)

        for card in book.cards:
            if card.vocab_item_id.value not in existing_item_ids:
                orm_model.cards.append(self.mapper.card_mapper.to_orm(card, orm_model.id))

        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, book_id: WordBookId, user_id: UserId) -> bool:
        orm_model = self._get_orm(book_id, user_id)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        return True
