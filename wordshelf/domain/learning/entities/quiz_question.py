from dataclasses import dataclass

from wordshelf.domain.common.value_objects import VocabItemId

BLANK_TOKEN = "______"


@dataclass(frozen=True)
class QuizQuestion:
    """A fill-in-the-blank multiple-choice question built from an example sentence."""

    vocab_item_id: VocabItemId
    sentence: str
    correct_answer: str
    options: tuple[str, ...]
    translation: str | None = None

    def is_correct(self, answer: str) -> bool:
        """Exact match against the correct headword, as the options are presented."""
        return answer == self.correct_answer
