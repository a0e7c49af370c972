"""Protocol for WordBook repository."""

from typing import Protocol

from wordshelf.domain.common.value_objects.ids import UserId, WordBookId
from wordshelf.domain.library.entities import WordBook


class WordBookRepositoryProtocol(Protocol):
    """Protocol for WordBook repository operations."""

    def find_by_id(self, book_id: WordBookId, user_id: UserId) -> WordBook | None:
        """
        Find a word-book, with its cards ordered by position.

        Returns:
            WordBook if found and owned by user, None otherwise
        """
        ...

    def find_all(self, user_id: UserId, tag: str | None = None) -> list[WordBook]:
        """
        Get the user's word-books newest first, with card_count set and cards not loaded.
        """
        ...

    def save(self, book: WordBook) -> WordBook:
        """
        Save a word-book (create or update).

        Cards are synchronised: new cards are inserted and cards no longer on
        the entity are deleted.
        """
        ...

    def delete(self, book_id: WordBookId, user_id: UserId) -> bool:
        """
        Delete a word-book and its cards. Vocab items are kept.

        Returns:
            True if deleted, False if not found
        """
        ...
