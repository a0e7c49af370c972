from collections.abc import Callable
from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from wordshelf.config import Settings, get_settings

# Keys checked here are guaranteed by Settings.validate_ai_provider_config


def _ollama(settings: Settings, model_name: str) -> Model:
    assert settings.OPENAI_BASE_URL is not None
    return OpenAIChatModel(model_name, provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL))


def _openai(settings: Settings, model_name: str) -> Model:
    assert settings.OPENAI_API_KEY is not None
    return OpenAIChatModel(model_name, provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY))


def _anthropic(settings: Settings, model_name: str) -> Model:
    assert settings.ANTHROPIC_API_KEY is not None
    return AnthropicModel(
        model_name, provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY)
    )


def _google(settings: Settings, model_name: str) -> Model:
    assert settings.GEMINI_API_KEY is not None
    return GoogleModel(model_name, provider=GoogleProvider(api_key=settings.GEMINI_API_KEY))


MODEL_FACTORIES: dict[str, Callable[[Settings, str], Model]] = {
    "ollama": _ollama,
    "openai": _openai,
    "anthropic": _anthropic,
    "google": _google,
}


@lru_cache
def get_ai_model() -> Model:
    """
    Model for the configured AI_PROVIDER.

    Built on first use, so provider clients are never created while AI is disabled.
    """
    settings = get_settings()
    factory = MODEL_FACTORIES.get(settings.AI_PROVIDER or "")
    if factory is None or settings.AI_MODEL_NAME is None:
        raise ValueError(f"Unsupported AI provider: {settings.AI_PROVIDER!r}")
    return factory(settings, settings.AI_MODEL_NAME)
