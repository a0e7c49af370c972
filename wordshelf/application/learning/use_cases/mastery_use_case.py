"""Use case for reading and resetting quiz progress."""

import structlog

from wordshelf.application.learning.protocols.mastery_repository import (
    MasteryRepositoryProtocol,
)
from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId
from wordshelf.domain.learning.entities import MasteryRecord
from wordshelf.exceptions import MasteryRecordNotFoundError, VocabItemNotFoundError

logger = structlog.get_logger(__name__)


class MasteryUseCase:
    def __init__(
        self,
        vocab_item_repository: VocabItemRepositoryProtocol,
        mastery_repository: MasteryRepositoryProtocol,
    ) -> None:
        self.vocab_item_repository = vocab_item_repository
        self.mastery_repository = mastery_repository

    def _check_item(self, vocab_item_id: int, user_id: UserId) -> VocabItemId:
        item_id = VocabItemId(vocab_item_id)
        if not self.vocab_item_repository.find_by_id(item_id, user_id):
            raise VocabItemNotFoundError(vocab_item_id)
        return item_id

    def get_mastery(self, vocab_item_id: int, user_id: int) -> MasteryRecord:
        """
        Raises:
            VocabItemNotFoundError: If the item is not found
            MasteryRecordNotFoundError: If the item has never been answered
        """
        user_id_vo = UserId(user_id)
        item_id = self._check_item(vocab_item_id, user_id_vo)

        record = self.mastery_repository.find(user_id_vo, item_id)
        if record is None:
            raise MasteryRecordNotFoundError(vocab_item_id)
        return record

    def reset_mastery(self, vocab_item_id: int, user_id: int) -> None:
        """
        Put an item back into Learning by discarding its progress.

        Raises:
            VocabItemNotFoundError: If the item is not found
            MasteryRecordNotFoundError: If the item has no progress to reset
        """
        user_id_vo = UserId(user_id)
        item_id = self._check_item(vocab_item_id, user_id_vo)

        if not self.mastery_repository.delete(user_id_vo, item_id):
            raise MasteryRecordNotFoundError(vocab_item_id)

        logger.info("mastery_reset", vocab_item_id=vocab_item_id, user_id=user_id)
