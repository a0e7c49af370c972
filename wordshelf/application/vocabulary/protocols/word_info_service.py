from typing import Protocol

from wordshelf.domain.vocabulary.entities import WordInfo


class WordInfoServiceProtocol(Protocol):
    async def lookup_word_info(self, word: str) -> WordInfo: ...
