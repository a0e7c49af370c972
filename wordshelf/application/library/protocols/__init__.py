from .word_book_repository import WordBookRepositoryProtocol

__all__ = ["WordBookRepositoryProtocol"]
