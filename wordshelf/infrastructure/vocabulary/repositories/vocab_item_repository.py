"""Repository for VocabItem domain entities."""

from collections.abc import Collection

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.domain.vocabulary.entities import VocabItem
from wordshelf.domain.vocabulary.exceptions import DuplicateHeadwordError
from wordshelf.exceptions import VocabItemNotFoundError
from wordshelf.infrastructure.vocabulary.mappers.vocab_item_mapper import VocabItemMapper
from wordshelf.models import MasteryRecord as MasteryRecordORM
from wordshelf.models import VocabItem as VocabItemORM
from wordshelf.models import WordBookCard as WordBookCardORM


class VocabItemRepository:
    """Repository for VocabItem domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = VocabItemMapper()

    def find_by_id(self, vocab_item_id: VocabItemId, user_id: UserId) -> VocabItem | None:
        stmt = select(VocabItemORM).where(
            VocabItemORM.id == vocab_item_id.value,
            VocabItemORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_front(self, front: str, user_id: UserId) -> VocabItem | None:
        stmt = select(VocabItemORM).where(
            VocabItemORM.front == front,
            VocabItemORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self, user_id: UserId, favorites_only: bool = False) -> list[VocabItem]:
        """
        Get all of a user's vocab items.

        Returns:
            List of vocab items ordered by created_at DESC
        """
        stmt = select(VocabItemORM).where(VocabItemORM.user_id == user_id.value)
        if favorites_only:
            stmt = stmt.where(VocabItemORM.is_favorite.is_(True))
        stmt = stmt.order_by(VocabItemORM.created_at.desc(), VocabItemORM.id.desc())
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_ids(
        self, vocab_item_ids: Collection[VocabItemId], user_id: UserId
    ) -> list[VocabItem]:
        """Get the user's items among vocab_item_ids, in the order the ids were given."""
        if not vocab_item_ids:
            return []
        stmt = select(VocabItemORM).where(
            VocabItemORM.id.in_([item_id.value for item_id in vocab_item_ids]),
            VocabItemORM.user_id == user_id.value,
        )
        by_id = {orm.id: orm for orm in self.db.execute(stmt).scalars().all()}
        return [
            self.mapper.to_domain(by_id[item_id.value])
            for item_id in vocab_item_ids
            if item_id.value in by_id
        ]

    def save(self, vocab_item: VocabItem) -> VocabItem:
        """
        Save a vocab item entity (create or update).

        Raises:
            DuplicateHeadwordError: If the user already has an item with this front
        """
        if vocab_item.id.is_persisted:
            orm_model = self.db.get(VocabItemORM, vocab_item.id.value)
            if not orm_model or orm_model.user_id != vocab_item.user_id.value:
                raise VocabItemNotFoundError(vocab_item.id.value)
            self.mapper.to_orm(vocab_item, orm_model)
        else:
            orm_model = self.mapper.to_orm(vocab_item)
            self.db.add(orm_model)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if "front" in str(e.orig):
                raise DuplicateHeadwordError(vocab_item.front) from e
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, vocab_item_id: VocabItemId, user_id: UserId) -> bool:
        """
        Delete a vocab item with its mastery records and word-book cards.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(VocabItemORM).where(
            VocabItemORM.id == vocab_item_id.value,
            VocabItemORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            return False

        self.db.execute(
            delete(WordBookCardORM).where(WordBookCardORM.vocab_item_id == vocab_item_id.value)
        )
        self.db.execute(
            delete(MasteryRecordORM).where(MasteryRecordORM.vocab_item_id == vocab_item_id.value)
        )
        self.db.delete(orm_model)
        self.db.commit()
        return True
