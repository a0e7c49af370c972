"""Result of a word-info lookup."""

from dataclasses import dataclass, field

from .example_sentence import ExampleSentence


@dataclass(frozen=True)
class WordInfo:
    """
    Enrichment for a headword returned by the word-info lookup.

    Every field is optional. Absent fields are None or empty.
    """

    phonetic: str | None = None
    chinese_definition: str | None = None
    english_definition: str | None = None
    synonyms: list[str] = field(default_factory=list)
    antonyms: list[str] = field(default_factory=list)
    related_words: list[str] = field(default_factory=list)
    examples: list[ExampleSentence] = field(default_factory=list)
