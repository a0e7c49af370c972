"""Use case for adding and removing word-book cards."""

import structlog

from wordshelf.application.library.protocols import WordBookRepositoryProtocol
from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.domain.common.value_objects.ids import UserId, VocabItemId, WordBookId
from wordshelf.domain.library.entities import WordBook, WordBookCard
from wordshelf.exceptions import NotFoundError, VocabItemNotFoundError, WordBookNotFoundError

logger = structlog.get_logger(__name__)


class WordBookCardsUseCase:
    """Manage which vocab items a word-book holds."""

    def __init__(
        self,
        word_book_repository: WordBookRepositoryProtocol,
        vocab_item_repository: VocabItemRepositoryProtocol,
        max_cards_per_book: int,
    ) -> None:
        self.word_book_repository = word_book_repository
        self.vocab_item_repository = vocab_item_repository
        self.max_cards_per_book = max_cards_per_book

    def _get_book(self, book_id: int, user_id: UserId) -> WordBook:
        book = self.word_book_repository.find_by_id(WordBookId(book_id), user_id)
        if not book:
            raise WordBookNotFoundError(book_id)
        return book

    def add_cards(
        self, book_id: int, user_id: int, vocab_item_ids: list[int]
    ) -> tuple[WordBook, list[WordBookCard]]:
        """
        Append vocab items to a word-book.

        Items already in the book are skipped. New cards are placed after
        the current last card in the order given.

        Returns:
            Tuple of (updated book, cards that were added)

        Raises:
            WordBookNotFoundError: If the book is not found
            VocabItemNotFoundError: If any item is missing or owned by another user
            BusinessRuleViolationError: If the book would exceed its card limit
        """
        user_id_vo = UserId(user_id)
        book = self._get_book(book_id, user_id_vo)

        requested = [VocabItemId(item_id) for item_id in vocab_item_ids]
        found = {item.id for item in self.vocab_item_repository.find_by_ids(requested, user_id_vo)}
        missing = [item_id for item_id in requested if item_id not in found]
        if missing:
            raise VocabItemNotFoundError(missing[0].value)

        added = book.add_cards(requested, self.max_cards_per_book)
        book = self.word_book_repository.save(book)

        logger.info(
            "added_word_book_cards",
            book_id=book_id,
            added=len(added),
            skipped=len(requested) - len(added),
        )
        return book, added

    def remove_card(self, book_id: int, user_id: int, vocab_item_id: int) -> WordBook:
        """
        Raises:
            WordBookNotFoundError: If the book is not found
            NotFoundError: If the item is not in the book
        """
        book = self._get_book(book_id, UserId(user_id))

        if book.remove_card(VocabItemId(vocab_item_id)) is None:
            raise NotFoundError(f"Vocab item {vocab_item_id} is not in word-book {book_id}")
        book = self.word_book_repository.save(book)

        logger.info("removed_word_book_card", book_id=book_id, vocab_item_id=vocab_item_id)
        return book
