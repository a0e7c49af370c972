"""Protocol for VocabItem repository."""

from collections.abc import Collection
from typing import Protocol

from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.domain.vocabulary.entities import VocabItem


class VocabItemRepositoryProtocol(Protocol):
    """Protocol for VocabItem repository operations."""

    def find_by_id(self, vocab_item_id: VocabItemId, user_id: UserId) -> VocabItem | None:
        """
        Find a vocab item by ID with user ownership check.

        Returns:
            VocabItem entity if found and owned by user, None otherwise
        """
        ...

    def find_by_front(self, front: str, user_id: UserId) -> VocabItem | None:
        """Find the user's vocab item for an exact (case-sensitive) headword."""
        ...

    def find_all(self, user_id: UserId, favorites_only: bool = False) -> list[VocabItem]:
        """
        Get all of a user's vocab items.

        Returns:
            List of vocab items ordered by created_at DESC
        """
        ...

    def find_by_ids(self, vocab_item_ids: Collection[VocabItemId], user_id: UserId) -> list[VocabItem]:
        """
        Get the user's vocab items among the given ids.

        Ids that do not exist or belong to another user are left out. The
        result keeps the order of vocab_item_ids.
        """
        ...

    def save(self, vocab_item: VocabItem) -> VocabItem:
        """Save a vocab item entity (create or update)."""
        ...

    def delete(self, vocab_item_id: VocabItemId, user_id: UserId) -> bool:
        """
        Delete a vocab item together with its mastery records and word-book cards.

        Returns:
            True if deleted, False if not found
        """
        ...
