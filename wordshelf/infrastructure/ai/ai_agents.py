from pydantic import BaseModel, Field
from pydantic_ai import Agent

from wordshelf.infrastructure.ai.ai_model import get_ai_model


class WordExample(BaseModel):
    sentence: str
    translation: str | None = None


class WordInfoResult(BaseModel):
    phonetic: str | None = None
    chinese_definition: str | None = None
    english_definition: str | None = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    related_words: list[str] = Field(default_factory=list)
    examples: list[WordExample] = Field(default_factory=list, max_length=3)


def get_word_info_agent() -> Agent[None, WordInfoResult]:
    return Agent(
        get_ai_model(),
        output_type=WordInfoResult,
        instructions="""
        You are a helpful English dictionary assistant for Chinese-speaking learners.
        When given an English word, provide:
        - phonetic: the phonetic transcription (IPA format)
        - chinese_definition: a clear definition in Traditional Chinese
        - english_definition: a clear English definition
        - synonyms: 3-5 synonyms
        - antonyms: 2-3 antonyms, or none if the word has no natural antonym
        - related_words: 3-5 related words
        - examples: three natural example sentences that each contain the word
          in exactly the given form, each with its Traditional Chinese translation
        """,
    )
