"""Use case for creating vocab items."""

import structlog

from wordshelf.application.vocabulary.protocols import (
    VocabItemRepositoryProtocol,
    WordInfoServiceProtocol,
)
from wordshelf.application.vocabulary.use_cases.dtos import VocabItemData
from wordshelf.domain.common.value_objects.ids import UserId
from wordshelf.domain.vocabulary.entities import VocabItem
from wordshelf.domain.vocabulary.exceptions import DuplicateHeadwordError

logger = structlog.get_logger(__name__)


class CreateVocabItemUseCase:
    """Use case for creating vocab items, optionally enriched by a word-info lookup."""

    def __init__(
        self,
        vocab_item_repository: VocabItemRepositoryProtocol,
        word_info_service: WordInfoServiceProtocol,
    ) -> None:
        """Initialize use case with repository and lookup service."""
        self.vocab_item_repository = vocab_item_repository
        self.word_info_service = word_info_service

    async def create_vocab_item(
        self, user_id: int, data: VocabItemData, autofill: bool = False
    ) -> VocabItem:
        """
        Create a new vocab item.

        Args:
            user_id: ID of the owner
            data: Attributes of the new item
            autofill: Look the headword up and fill in the fields left empty

        Returns:
            Created vocab item

        Raises:
            DuplicateHeadwordError: If the user already has this headword
            ValidationError: If front or back is empty
            CollaboratorUnavailableError: If autofill was requested and the lookup failed
        """
        user_id_vo = UserId(user_id)

        vocab_item = VocabItem.create(
            user_id=user_id_vo,
            front=data.front,
            back=data.back,
            phonetic=data.phonetic,
            chinese_definition=data.chinese_definition,
            english_definition=data.english_definition,
            synonyms=list(data.synonyms),
            antonyms=list(data.antonyms),
            related_words=list(data.related_words),
            image_url=data.image_url,
            examples=list(data.examples),
            is_favorite=data.is_favorite,
            tags=list(data.tags),
            difficulty_level=data.difficulty_level,
        )

        if self.vocab_item_repository.find_by_front(vocab_item.front, user_id_vo):
            raise DuplicateHeadwordError(vocab_item.front)

        if autofill:
            word_info = await self.word_info_service.lookup_word_info(vocab_item.front)
            vocab_item.fill_missing(word_info)

        vocab_item = self.vocab_item_repository.save(vocab_item)

        logger.info(
            "created_vocab_item",
            vocab_item_id=vocab_item.id.value,
            user_id=user_id,
            autofill=autofill,
        )
        return vocab_item
