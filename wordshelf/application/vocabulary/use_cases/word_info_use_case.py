"""Use case for word-info lookups."""

import structlog

from wordshelf.application.vocabulary.protocols import WordInfoServiceProtocol
from wordshelf.domain.vocabulary.entities import WordInfo
from wordshelf.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class WordInfoUseCase:
    """Looks up definitions, related words and example sentences for a headword."""

    def __init__(self, word_info_service: WordInfoServiceProtocol) -> None:
        self.word_info_service = word_info_service

    async def get_word_info(self, word: str) -> WordInfo:
        """
        Raises:
            ValidationError: If word is blank
            CollaboratorUnavailableError: If the lookup service failed
        """
        word = word.strip()
        if not word:
            raise ValidationError("Word is required", status_code=400)

        word_info = await self.word_info_service.lookup_word_info(word)

        logger.info(
            "word_info_looked_up",
            word=word,
            example_count=len(word_info.examples),
        )
        return word_info
