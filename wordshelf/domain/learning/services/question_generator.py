"""
Domain service that turns a vocab item into a multiple-choice cloze question.

This is a pure domain service: its only input besides the items is the
random source, which callers may seed for deterministic output.
"""

import random
import re
from collections.abc import Sequence

from wordshelf.domain.common.exceptions import ValidationError
from wordshelf.domain.learning.entities.quiz_question import BLANK_TOKEN, QuizQuestion
from wordshelf.domain.vocabulary.entities import VocabItem

DISTRACTOR_COUNT = 3


def blank_headword(sentence: str, headword: str) -> str:
    """
    Replace every whole-word, case-insensitive occurrence of headword with BLANK_TOKEN.

    A sentence that does not contain the headword literally (an inflected
    form, for instance) comes back unchanged.
    """
    pattern = re.compile(rf"(?<!\w){re.escape(headword)}(?!\w)", re.IGNORECASE)
    return pattern.sub(BLANK_TOKEN, sentence)


class QuestionGenerator:
    """
    Builds quiz questions from a target item and the pool it was drawn from.

    The other headwords in the pool serve as distractors.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate(self, pool: Sequence[VocabItem], target: VocabItem) -> QuizQuestion:
        """
        Build a question for target.

        Args:
            pool: Items that may supply distractors (target may be among them)
            target: The item being asked about

        Returns:
            A question whose options hold the correct headword exactly once plus
            up to DISTRACTOR_COUNT distinct distractors, in shuffled order

        Raises:
            ValidationError: If target has no example sentence
        """
        example = target.first_example
        if example is None:
            raise ValidationError(
                "Cannot build a quiz question without an example sentence",
                field="examples",
                value=target.front,
            )

        distractors = self._pick_distractors(pool, target)
        options = [*distractors, target.front]
        self._rng.shuffle(options)

        return QuizQuestion(
            vocab_item_id=target.id,
            sentence=blank_headword(example.sentence, target.front),
            correct_answer=target.front,
            options=tuple(options),
            translation=example.translation,
        )

    def _pick_distractors(self, pool: Sequence[VocabItem], target: VocabItem) -> list[str]:
        candidates: list[str] = []
        for item in pool:
            if item.id == target.id or item.front == target.front:
                continue
            if item.front not in candidates:
                candidates.append(item.front)

        return self._rng.sample(candidates, min(DISTRACTOR_COUNT, len(candidates)))
