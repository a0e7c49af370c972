"""Tests for playlist building and sequential read-aloud playback."""

import asyncio
from datetime import UTC, datetime

import pytest

from wordshelf.application.learning.services.read_aloud_player import (
    LanguageMode,
    PlayMode,
    ReadAloudPlayer,
    Utterance,
    build_playlist,
)
from wordshelf.domain.common.value_objects import UserId, VocabItemId
from wordshelf.domain.vocabulary.entities import ExampleSentence, VocabItem


def _item(id: int, *examples: tuple[str, str | None]) -> VocabItem:
    now = datetime.now(UTC)
    return VocabItem.create_with_id(
        id=VocabItemId(id),
        user_id=UserId(1),
        front=f"word{id}",
        back="meaning",
        created_at=now,
        updated_at=now,
        examples=[ExampleSentence(sentence=s, translation=t) for s, t in examples],
    )


def _utterances(*texts: str) -> list[Utterance]:
    return [
        Utterance(text=text, lang="en-US", vocab_item_id=VocabItemId(1), example_index=0)
        for text in texts
    ]


class FakeSynthesizer:
    """Records what is spoken. Utterances listed in `blocking` wait until released."""

    def __init__(self, blocking: set[str] | None = None) -> None:
        self.started: list[str] = []
        self.finished: list[str] = []
        self.blocking = blocking or set()
        self.release = asyncio.Event()

    async def speak(self, text: str, lang: str) -> None:
        self.started.append(text)
        if text in self.blocking:
            await self.release.wait()
        else:
            await asyncio.sleep(0)
        self.finished.append(text)


class TestBuildPlaylist:
    @pytest.fixture
    def items(self) -> list[VocabItem]:
        return [
            _item(1, ("One A.", "一甲"), ("One B.", None)),
            _item(2),
            _item(3, ("Three A.", "三甲")),
        ]

    def test_single_english(self, items: list[VocabItem]) -> None:
        playlist = build_playlist(items)

        assert [u.text for u in playlist] == ["One A.", "Three A."]
        assert {u.lang for u in playlist} == {"en-US"}

    def test_all_english(self, items: list[VocabItem]) -> None:
        playlist = build_playlist(items, play_mode=PlayMode.ALL)

        assert [(u.text, u.example_index) for u in playlist] == [
            ("One A.", 0),
            ("One B.", 1),
            ("Three A.", 0),
        ]

    def test_all_both_puts_translation_after_its_sentence(self, items: list[VocabItem]) -> None:
        playlist = build_playlist(
            items,
            play_mode=PlayMode.ALL,
            language_mode=LanguageMode.BOTH,
            sentence_lang="en-GB",
            translation_lang="zh-CN",
        )

        assert [(u.text, u.lang, u.is_translation) for u in playlist] == [
            ("One A.", "en-GB", False),
            ("一甲", "zh-CN", True),
            ("One B.", "en-GB", False),
            ("Three A.", "en-GB", False),
            ("三甲", "zh-CN", True),
        ]
        assert [u.vocab_item_id.value for u in playlist] == [1, 1, 1, 3, 3]

    def test_empty(self) -> None:
        assert build_playlist([]) == []


class TestReadAloudPlayer:
    async def test_speaks_in_order(self) -> None:
        synthesizer = FakeSynthesizer()
        player = ReadAloudPlayer(synthesizer)
        progress: list[tuple[int, str]] = []

        completed = await player.play(
            _utterances("a", "b", "c"), on_progress=lambda n, u: progress.append((n, u.text))
        )

        assert completed == 3
        assert synthesizer.finished == ["a", "b", "c"]
        assert progress == [(1, "a"), (2, "b"), (3, "c")]
        assert player.is_playing is False

    async def test_next_utterance_waits_for_previous(self) -> None:
        synthesizer = FakeSynthesizer(blocking={"a"})
        player = ReadAloudPlayer(synthesizer)

        task = asyncio.create_task(player.play(_utterances("a", "b")))
        await asyncio.sleep(0.01)

        assert synthesizer.started == ["a"]
        assert player.is_playing is True

        synthesizer.release.set()
        assert await task == 2
        assert synthesizer.started == ["a", "b"]

    async def test_stop_cancels_current_and_drops_queue(self) -> None:
        synthesizer = FakeSynthesizer(blocking={"b"})
        player = ReadAloudPlayer(synthesizer)

        task = asyncio.create_task(player.play(_utterances("a", "b", "c")))
        await asyncio.sleep(0.01)
        player.stop()
        completed = await task

        assert completed == 1
        assert synthesizer.started == ["a", "b"]
        assert synthesizer.finished == ["a"]
        assert player.is_playing is False

    async def test_new_playlist_replaces_running_one(self) -> None:
        synthesizer = FakeSynthesizer(blocking={"a"})
        player = ReadAloudPlayer(synthesizer)

        first = asyncio.create_task(player.play(_utterances("a", "b")))
        await asyncio.sleep(0.01)
        second = await player.play(_utterances("x", "y"))

        assert await first == 0
        assert second == 2
        assert synthesizer.finished == ["x", "y"]

    async def test_stop_when_idle(self) -> None:
        player = ReadAloudPlayer(FakeSynthesizer())

        player.stop()

        assert player.is_playing is False
        assert await player.play([]) == 0
