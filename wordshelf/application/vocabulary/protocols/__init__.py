from .vocab_item_repository import VocabItemRepositoryProtocol
from .word_info_service import WordInfoServiceProtocol

__all__ = ["VocabItemRepositoryProtocol", "WordInfoServiceProtocol"]
