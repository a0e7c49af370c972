"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordshelf.domain.learning.entities.mastery_record import (
    MAX_REQUIRED_STREAK,
    MIN_REQUIRED_STREAK,
)

MIN_SECRET_KEY_LENGTH = 32

AIProvider = Literal["ollama", "openai", "anthropic", "google"]

AI_PROVIDER_REQUIRED_SETTING: dict[str, str] = {
    "ollama": "OPENAI_BASE_URL",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "google": "GEMINI_API_KEY",
}


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./wordshelf.db"

    SECRET_KEY: str = ""

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "wordshelf API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: str | None = None

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Auth
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    REFRESH_TOKEN_EXPIRE_DAYS: int = 30
    REFRESH_TOKEN_SECRET_KEY: str = ""
    COOKIE_SECURE: bool = True
    PASSWORD_PEPPER: str = ""

    # Registration
    ALLOW_USER_REGISTRATIONS: bool = True

    # Quiz
    DEFAULT_REQUIRED_STREAK: int = 2
    QUIZ_SESSION_TIMEOUT_MINUTES: int = 120

    # Word-books
    MAX_CARDS_PER_BOOK: int = 200

    # Review read-aloud
    SPEECH_LANGUAGE: str = "en-US"
    TRANSLATION_LANGUAGE: str = "zh-TW"

    # AI configuration
    AI_PROVIDER: AIProvider | None = None
    AI_MODEL_NAME: str | None = None

    OPENAI_BASE_URL: str | None = None  # ollama
    OPENAI_API_KEY: str | None = None
    ANTHROPIC_API_KEY: str | None = None
    GEMINI_API_KEY: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ai_enabled(self) -> bool:
        """Whether AI features are enabled."""
        return self.AI_PROVIDER is not None

    @field_validator("DEFAULT_REQUIRED_STREAK", mode="after")
    @classmethod
    def validate_required_streak(cls, value: int) -> int:
        """Reject streak thresholds outside the supported range."""
        if not MIN_REQUIRED_STREAK <= value <= MAX_REQUIRED_STREAK:
            msg = (
                f"DEFAULT_REQUIRED_STREAK must be between {MIN_REQUIRED_STREAK} "
                f"and {MAX_REQUIRED_STREAK}, got {value}"
            )
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Production deployments must set a strong signing key."""
        if self.ENVIRONMENT == "production" and len(self.SECRET_KEY) < MIN_SECRET_KEY_LENGTH:
            msg = f"SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters in production"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_ai_provider_config(self) -> "Settings":
        """An AI provider needs a model name and its own connection setting."""
        if self.AI_PROVIDER is None:
            return self
        if self.AI_MODEL_NAME is None:
            msg = f"AI_MODEL_NAME is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)
        required = AI_PROVIDER_REQUIRED_SETTING[self.AI_PROVIDER]
        if not getattr(self, required):
            msg = f"{required} is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """
    Route stdlib logging and structlog through one pipeline.

    Production renders JSON lines, other environments a coloured console. The
    level defaults to DEBUG in development and INFO elsewhere.
    """
    if level is None:
        level = "DEBUG" if environment == "development" else "INFO"
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level.upper())

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    processors: list[Callable[..., Any]] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
