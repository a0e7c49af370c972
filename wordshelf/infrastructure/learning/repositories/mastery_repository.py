"""Repository for MasteryRecord values."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.domain.learning.entities import MasteryRecord
from wordshelf.exceptions import CollaboratorUnavailableError, VocabItemNotFoundError
from wordshelf.infrastructure.learning.mappers.mastery_mapper import MasteryRecordMapper
from wordshelf.models import MasteryRecord as MasteryRecordORM

logger = structlog.get_logger(__name__)


class MasteryRepository:
    """Stores one mastery record per (user, vocab item)."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = MasteryRecordMapper()

    def find(self, user_id: UserId, vocab_item_id: VocabItemId) -> MasteryRecord | None:
        orm_model = self.db.get(MasteryRecordORM, (user_id.value, vocab_item_id.value))
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(self, user_id: UserId) -> list[MasteryRecord]:
        stmt = select(MasteryRecordORM).where(MasteryRecordORM.user_id == user_id.value)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_learned_item_ids(self, user_id: UserId) -> set[VocabItemId]:
        stmt = select(MasteryRecordORM.vocab_item_id).where(
            MasteryRecordORM.user_id == user_id.value,
            MasteryRecordORM.is_learned.is_(True),
        )
        return {VocabItemId(item_id) for item_id in self.db.execute(stmt).scalars().all()}

    def has_any(self, user_id: UserId) -> bool:
        stmt = select(MasteryRecordORM.vocab_item_id).where(
            MasteryRecordORM.user_id == user_id.value
        )
        return self.db.execute(stmt.limit(1)).first() is not None

    def upsert(self, record: MasteryRecord) -> MasteryRecord:
        """
        Insert or overwrite the record for (user_id, vocab_item_id). The last write wins.

        Raises:
            VocabItemNotFoundError: If the vocab item no longer exists
            CollaboratorUnavailableError: If the database cannot be written
        """
        key = (record.user_id.value, record.vocab_item_id.value)
        try:
            try:
                orm_model = self.mapper.to_orm(record, self.db.get(MasteryRecordORM, key))
                self.db.add(orm_model)
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                existing = self.db.get(MasteryRecordORM, key)
                if existing is None:
                    # Not a concurrent insert: the item row is gone
                    raise VocabItemNotFoundError(record.vocab_item_id.value) from e
                orm_model = self.mapper.to_orm(record, existing)
                self.db.add(orm_model)
                self.db.commit()
        except OperationalError as e:
            self.db.rollback()
            logger.error("mastery_record_write_failed", key=key, error=str(e))
            raise CollaboratorUnavailableError("Progress store") from e

        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, user_id: UserId, vocab_item_id: VocabItemId) -> bool:
        orm_model = self.db.get(MasteryRecordORM, (user_id.value, vocab_item_id.value))
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True
