"""Protocol for MasteryRecord repository."""

from typing import Protocol

from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.domain.learning.entities import MasteryRecord


class MasteryRepositoryProtocol(Protocol):
    """Protocol for per-user mastery record persistence."""

    def find(self, user_id: UserId, vocab_item_id: VocabItemId) -> MasteryRecord | None: ...

    def find_by_user(self, user_id: UserId) -> list[MasteryRecord]: ...

    def find_learned_item_ids(self, user_id: UserId) -> set[VocabItemId]: ...

    def has_any(self, user_id: UserId) -> bool: ...

    def upsert(self, record: MasteryRecord) -> MasteryRecord:
        """
        Insert or replace the record keyed by (user_id, vocab_item_id).

        The last write wins.
        """
        ...

    def delete(self, user_id: UserId, vocab_item_id: VocabItemId) -> bool: ...
