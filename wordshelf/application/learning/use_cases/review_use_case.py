"""Use case for the read-aloud review flow."""

import structlog

from wordshelf.application.learning.protocols.mastery_repository import (
    MasteryRepositoryProtocol,
)
from wordshelf.application.learning.services.read_aloud_player import (
    LanguageMode,
    PlayMode,
    Utterance,
    build_playlist,
)
from wordshelf.application.learning.use_cases.pool_loader import StudyPoolLoader
from wordshelf.domain.common.value_objects.ids import UserId, WordBookId
from wordshelf.domain.vocabulary.entities import VocabItem

logger = structlog.get_logger(__name__)


class ReviewUseCase:
    """Selects items due for review and lays out what to read aloud."""

    def __init__(
        self,
        pool_loader: StudyPoolLoader,
        mastery_repository: MasteryRepositoryProtocol,
        sentence_lang: str,
        translation_lang: str,
    ) -> None:
        self.pool_loader = pool_loader
        self.mastery_repository = mastery_repository
        self.sentence_lang = sentence_lang
        self.translation_lang = translation_lang

    def get_review_items(self, user_id: int, word_book_id: int | None = None) -> list[VocabItem]:
        """
        Items not yet mastered. A user who has never answered a quiz reviews everything.

        Raises:
            WordBookNotFoundError: If the word-book is not found
        """
        user_id_vo = UserId(user_id)
        book_id_vo = WordBookId(word_book_id) if word_book_id is not None else None

        pool = self.pool_loader.load(user_id_vo, book_id_vo)
        if not self.mastery_repository.has_any(user_id_vo):
            return pool

        learned = self.mastery_repository.find_learned_item_ids(user_id_vo)
        return [item for item in pool if item.id not in learned]

    def get_playlist(
        self,
        user_id: int,
        play_mode: PlayMode = PlayMode.SINGLE,
        language_mode: LanguageMode = LanguageMode.ENGLISH,
        word_book_id: int | None = None,
    ) -> tuple[list[VocabItem], list[Utterance]]:
        """
        Returns:
            Tuple of (review items, utterances to speak in order)
        """
        items = self.get_review_items(user_id, word_book_id)
        playlist = build_playlist(
            items,
            play_mode=play_mode,
            language_mode=language_mode,
            sentence_lang=self.sentence_lang,
            translation_lang=self.translation_lang,
        )

        logger.info(
            "review_playlist_built",
            user_id=user_id,
            items=len(items),
            utterances=len(playlist),
            play_mode=play_mode.value,
            language_mode=language_mode.value,
        )
        return items, playlist
