import httpx
import structlog
from pydantic_ai.exceptions import AgentRunError, UserError

from wordshelf.domain.vocabulary.entities import MAX_EXAMPLES, ExampleSentence, WordInfo
from wordshelf.exceptions import CollaboratorUnavailableError
from wordshelf.infrastructure.ai.ai_agents import WordInfoResult, get_word_info_agent

logger = structlog.get_logger(__name__)


def _clean_list(values: list[str]) -> list[str]:
    return [value.strip() for value in values if value and value.strip()]


def to_word_info(result: WordInfoResult) -> WordInfo:
    """Convert agent output to the domain value, dropping blank entries."""
    examples = [
        ExampleSentence(
            sentence=example.sentence.strip(),
            translation=(example.translation or "").strip() or None,
            source="AI",
        )
        for example in result.examples
        if example.sentence and example.sentence.strip()
    ]
    return WordInfo(
        phonetic=result.phonetic or None,
        chinese_definition=result.chinese_definition or None,
        english_definition=result.english_definition or None,
        synonyms=_clean_list(result.synonyms),
        antonyms=_clean_list(result.antonyms),
        related_words=_clean_list(result.related_words),
        examples=examples[:MAX_EXAMPLES],
    )


class AIWordInfoService:
    async def lookup_word_info(self, word: str) -> WordInfo:
        """
        Raises:
            CollaboratorUnavailableError: If the model call fails or returns unusable output
        """
        agent = get_word_info_agent()
        try:
            result = await agent.run(f'Please provide information for the word: "{word}"')
        except (AgentRunError, UserError, httpx.HTTPError) as e:
            logger.error("word_info_lookup_failed", word=word, error=str(e))
            raise CollaboratorUnavailableError("Word-info lookup", str(e)) from e
        return to_word_info(result.output)
