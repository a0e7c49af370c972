"""Loads the vocab items a quiz or review runs over."""

from wordshelf.application.library.protocols import WordBookRepositoryProtocol
from wordshelf.application.vocabulary.protocols import VocabItemRepositoryProtocol
from wordshelf.domain.common.value_objects.ids import UserId, WordBookId
from wordshelf.domain.vocabulary.entities import VocabItem
from wordshelf.exceptions import WordBookNotFoundError


class StudyPoolLoader:
    """The user's vocab items, or those of one of their word-books in card order."""

    def __init__(
        self,
        vocab_item_repository: VocabItemRepositoryProtocol,
        word_book_repository: WordBookRepositoryProtocol,
    ) -> None:
        self.vocab_item_repository = vocab_item_repository
        self.word_book_repository = word_book_repository

    def load(self, user_id: UserId, word_book_id: WordBookId | None = None) -> list[VocabItem]:
        """
        Raises:
            WordBookNotFoundError: If word_book_id is given and not owned by the user
        """
        if word_book_id is None:
            return self.vocab_item_repository.find_all(user_id)

        book = self.word_book_repository.find_by_id(word_book_id, user_id)
        if not book:
            raise WordBookNotFoundError(word_book_id.value)
        return self.vocab_item_repository.find_by_ids(book.vocab_item_ids, user_id)
