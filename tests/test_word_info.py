"""Tests for AI word-info lookup and autofill."""

from collections.abc import Generator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from pydantic_ai.exceptions import AgentRunError
from sqlalchemy.orm import Session

from wordshelf import models
from wordshelf.infrastructure.ai.ai_agents import WordExample, WordInfoResult

WORD_INFO_URL = "/api/v1/vocab-items/word-info"

LOOKUP = WordInfoResult(
    phonetic="/ˈlæn.tɚn/",
    chinese_definition="燈籠",
    english_definition="A lamp with a transparent case protecting the flame.",
    synonyms=["lamp", " ", "light"],
    antonyms=[],
    related_words=["candle", "torch"],
    examples=[
        WordExample(sentence="She carried a lantern down the path.", translation="她提著燈籠走下小路。"),
        WordExample(sentence="   "),
        WordExample(sentence="The lantern flickered.", translation=None),
    ],
)


@pytest.fixture
def ai_enabled() -> Generator[None, None, None]:
    with patch("wordshelf.dependencies.is_ai_enabled", return_value=True):
        yield


@pytest.fixture
def word_info_agent() -> Generator[MagicMock, None, None]:
    agent = MagicMock()
    agent.run = AsyncMock(return_value=SimpleNamespace(output=LOOKUP))
    with patch(
        "wordshelf.infrastructure.ai.ai_service.get_word_info_agent", return_value=agent
    ):
        yield agent


class TestWordInfoLookup:
    """Test suite for POST /vocab-items/word-info."""

    def test_disabled_returns_gone(self, client: TestClient) -> None:
        with patch("wordshelf.dependencies.is_ai_enabled", return_value=False):
            response = client.post(WORD_INFO_URL, json={"word": "lantern"})

        assert response.status_code == status.HTTP_410_GONE
        assert response.json()["detail"] == "AI features are not enabled on this server"

    def test_lookup(
        self, client: TestClient, ai_enabled: None, word_info_agent: MagicMock
    ) -> None:
        response = client.post(WORD_INFO_URL, json={"word": "  lantern "})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["word"] == "lantern"
        assert data["phonetic"] == "/ˈlæn.tɚn/"
        assert data["synonyms"] == ["lamp", "light"]
        assert data["examples"] == [
            {
                "sentence": "She carried a lantern down the path.",
                "translation": "她提著燈籠走下小路。",
                "source": "AI",
            },
            {"sentence": "The lantern flickered.", "translation": None, "source": "AI"},
        ]
        prompt = word_info_agent.run.await_args.args[0]
        assert '"lantern"' in prompt

    def test_lookup_does_not_store(
        self,
        client: TestClient,
        db_session: Session,
        ai_enabled: None,
        word_info_agent: MagicMock,
    ) -> None:
        client.post(WORD_INFO_URL, json={"word": "lantern"})

        assert db_session.query(models.VocabItem).count() == 0

    def test_agent_failure_returns_service_unavailable(
        self, client: TestClient, ai_enabled: None, word_info_agent: MagicMock
    ) -> None:
        word_info_agent.run.side_effect = AgentRunError("model overloaded")

        response = client.post(WORD_INFO_URL, json={"word": "lantern"})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert "unavailable" in response.json()["detail"]

    def test_blank_word_rejected(self, client: TestClient, ai_enabled: None) -> None:
        response = client.post(WORD_INFO_URL, json={"word": ""})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestAutofill:
    """Test suite for POST /vocab-items with autofill."""

    def test_autofill_disabled_returns_gone(self, client: TestClient) -> None:
        with patch("wordshelf.dependencies.is_ai_enabled", return_value=False):
            response = client.post(
                "/api/v1/vocab-items",
                json={"front": "lantern", "back": "燈籠", "autofill": True},
            )

        assert response.status_code == status.HTTP_410_GONE

    def test_autofill_fills_only_empty_fields(
        self,
        client: TestClient,
        db_session: Session,
        ai_enabled: None,
        word_info_agent: MagicMock,
    ) -> None:
        response = client.post(
            "/api/v1/vocab-items",
            json={
                "front": "lantern",
                "back": "燈籠",
                "phonetic": "/my-own/",
                "autofill": True,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        vocab_item = response.json()["vocab_item"]
        assert vocab_item["phonetic"] == "/my-own/"
        assert vocab_item["chinese_definition"] == "燈籠"
        assert vocab_item["related_words"] == ["candle", "torch"]
        assert [example["sentence"] for example in vocab_item["examples"]] == [
            "She carried a lantern down the path.",
            "The lantern flickered.",
        ]

        stored = db_session.query(models.VocabItem).filter_by(front="lantern").one()
        assert stored.example_sentence_1 == "She carried a lantern down the path."
        assert stored.example_sentence_3 is None

    def test_autofill_failure_stores_nothing(
        self,
        client: TestClient,
        db_session: Session,
        ai_enabled: None,
        word_info_agent: MagicMock,
    ) -> None:
        word_info_agent.run.side_effect = AgentRunError("model overloaded")

        response = client.post(
            "/api/v1/vocab-items",
            json={"front": "lantern", "back": "燈籠", "autofill": True},
        )

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert db_session.query(models.VocabItem).count() == 0
