"""Use case for deleting vocab items."""

import structlog

from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.exceptions import VocabItemNotFoundError

logger = structlog.get_logger(__name__)


class DeleteVocabItemUseCase:
    """Use case for deleting vocab items."""

    def __init__(self, vocab_item_repository: VocabItemRepositoryProtocol) -> None:
        self.vocab_item_repository = vocab_item_repository

    def delete_vocab_item(self, vocab_item_id: int, user_id: int) -> None:
        """
        Delete a vocab item. Its mastery records and word-book cards go with it.

        Raises:
            VocabItemNotFoundError: If the item is not found
        """
        deleted = self.vocab_item_repository.delete(VocabItemId(vocab_item_id), UserId(user_id))
        if not deleted:
            raise VocabItemNotFoundError(vocab_item_id)

        logger.info("deleted_vocab_item", vocab_item_id=vocab_item_id)
