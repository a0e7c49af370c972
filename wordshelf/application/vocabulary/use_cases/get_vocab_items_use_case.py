"""Use case for reading vocab items with their mastery state."""

from wordshelf.application.learning.protocols.mastery_repository import (
    MasteryRepositoryProtocol,
)
from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.application.vocabulary.use_cases.dtos import VocabItemWithMastery
from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.exceptions import VocabItemNotFoundError


class GetVocabItemsUseCase:
    """Queries over a user's vocab items."""

    def __init__(
        self,
        vocab_item_repository: VocabItemRepositoryProtocol,
        mastery_repository: MasteryRepositoryProtocol,
    ) -> None:
        self.vocab_item_repository = vocab_item_repository
        self.mastery_repository = mastery_repository

    def get_vocab_item(self, vocab_item_id: int, user_id: int) -> VocabItemWithMastery:
        """
        Raises:
            VocabItemNotFoundError: If the item does not exist or belongs to another user
        """
        user_id_vo = UserId(user_id)
        item_id_vo = VocabItemId(vocab_item_id)

        vocab_item = self.vocab_item_repository.find_by_id(item_id_vo, user_id_vo)
        if not vocab_item:
            raise VocabItemNotFoundError(vocab_item_id)

        return VocabItemWithMastery(
            vocab_item=vocab_item,
            mastery=self.mastery_repository.find(user_id_vo, item_id_vo),
        )

    def get_vocab_item_by_front(self, front: str, user_id: int) -> VocabItemWithMastery:
        """
        Raises:
            VocabItemNotFoundError: If the user has no item for this headword
        """
        user_id_vo = UserId(user_id)

        vocab_item = self.vocab_item_repository.find_by_front(front, user_id_vo)
        if not vocab_item:
            raise VocabItemNotFoundError(message=f"Vocab item '{front}' not found")

        return VocabItemWithMastery(
            vocab_item=vocab_item,
            mastery=self.mastery_repository.find(user_id_vo, vocab_item.id),
        )

    def list_vocab_items(
        self,
        user_id: int,
        learned: bool | None = None,
        favorites_only: bool = False,
    ) -> list[VocabItemWithMastery]:
        """
        List the user's vocab items, newest first.

        Args:
            user_id: ID of the owner
            learned: When set, keep only mastered (True) or not yet mastered (False) items
            favorites_only: Keep only favorites
        """
        user_id_vo = UserId(user_id)

        records = {
            record.vocab_item_id: record
            for record in self.mastery_repository.find_by_user(user_id_vo)
        }
        results = [
            VocabItemWithMastery(vocab_item=item, mastery=records.get(item.id))
            for item in self.vocab_item_repository.find_all(
                user_id_vo, favorites_only=favorites_only
            )
        ]

        if learned is None:
            return results
        return [result for result in results if result.is_learned == learned]
