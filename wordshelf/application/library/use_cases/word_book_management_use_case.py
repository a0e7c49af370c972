"""Use case for word-book management operations."""

import structlog

from wordshelf.application.library.protocols import WordBookRepositoryProtocol
from wordshelf.application.library.use_cases.dtos import WordBookDetails
from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.domain.common.value_objects.ids import UserId, WordBookId
from wordshelf.domain.library.entities import WordBook
from wordshelf.exceptions import WordBookNotFoundError

logger = structlog.get_logger(__name__)


class WordBookManagementUseCase:
    """Create, read, update and delete word-books."""

    def __init__(
        self,
        word_book_repository: WordBookRepositoryProtocol,
        vocab_item_repository: VocabItemRepositoryProtocol,
    ) -> None:
        self.word_book_repository = word_book_repository
        self.vocab_item_repository = vocab_item_repository

    def create_word_book(
        self,
        user_id: int,
        title: str,
        description: str | None = None,
        tag: str | None = None,
        cover_image_url: str | None = None,
    ) -> WordBook:
        """
        Create an empty word-book.

        Raises:
            DomainError: If title is empty
        """
        book = WordBook.create(
            user_id=UserId(user_id),
            title=title,
            description=description,
            tag=tag,
            cover_image_url=cover_image_url,
        )
        book = self.word_book_repository.save(book)

        logger.info("created_word_book", book_id=book.id.value, user_id=user_id)
        return book

    def list_word_books(self, user_id: int, tag: str | None = None) -> list[WordBook]:
        return self.word_book_repository.find_all(UserId(user_id), tag=tag)

    def get_word_book(self, book_id: int, user_id: int) -> WordBookDetails:
        """
        Get a word-book with its vocab items in card order.

        Raises:
            WordBookNotFoundError: If the book is not found
        """
        user_id_vo = UserId(user_id)
        book = self.word_book_repository.find_by_id(WordBookId(book_id), user_id_vo)
        if not book:
            raise WordBookNotFoundError(book_id)

        vocab_items = self.vocab_item_repository.find_by_ids(book.vocab_item_ids, user_id_vo)
        return WordBookDetails(book=book, vocab_items=vocab_items)

    def update_word_book(
        self,
        book_id: int,
        user_id: int,
        title: str | None = None,
        description: str | None = None,
        tag: str | None = None,
        cover_image_url: str | None = None,
    ) -> WordBook:
        """
        Update a word-book's details. Fields left as None are unchanged.

        Raises:
            WordBookNotFoundError: If the book is not found
            DomainError: If the new title is empty
        """
        book = self.word_book_repository.find_by_id(WordBookId(book_id), UserId(user_id))
        if not book:
            raise WordBookNotFoundError(book_id)

        if title is not None:
            book.rename(title)
        book.update_details(description=description, tag=tag, cover_image_url=cover_image_url)
        book = self.word_book_repository.save(book)

        logger.info("updated_word_book", book_id=book_id)
        return book

    def delete_word_book(self, book_id: int, user_id: int) -> None:
        """
        Raises:
            WordBookNotFoundError: If the book is not found
        """
        if not self.word_book_repository.delete(WordBookId(book_id), UserId(user_id)):
            raise WordBookNotFoundError(book_id)

        logger.info("deleted_word_book", book_id=book_id)
