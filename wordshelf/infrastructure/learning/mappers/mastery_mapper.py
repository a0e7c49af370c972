"""Mapper for MasteryRecord ORM and domain conversion."""

from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.domain.learning.entities import MasteryRecord
from wordshelf.models import MasteryRecord as MasteryRecordORM


class MasteryRecordMapper:
    def to_domain(self, orm_model: MasteryRecordORM) -> MasteryRecord:
        return MasteryRecord(
            user_id=UserId(orm_model.user_id),
            vocab_item_id=VocabItemId(orm_model.vocab_item_id),
            correct_streak=orm_model.correct_streak,
            is_learned=orm_model.is_learned,
            review_count=orm_model.review_count,
            last_reviewed_at=orm_model.last_reviewed_at,
        )

    def to_orm(
        self, domain_entity: MasteryRecord, orm_model: MasteryRecordORM | None = None
    ) -> MasteryRecordORM:
        if orm_model is None:
            orm_model = MasteryRecordORM(
                user_id=domain_entity.user_id.value,
                vocab_item_id=domain_entity.vocab_item_id.value,
            )
        orm_model.correct_streak = domain_entity.correct_streak
        orm_model.is_learned = domain_entity.is_learned
        orm_model.review_count = domain_entity.review_count
        orm_model.last_reviewed_at = domain_entity.last_reviewed_at
        return orm_model
