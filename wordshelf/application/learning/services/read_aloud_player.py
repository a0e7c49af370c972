"""
Read-aloud playback for the review flow.

`build_playlist` turns vocab items into utterances. `ReadAloudPlayer` speaks
them through a speech synthesizer one at a time, each to completion before
the next starts.
"""

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

import structlog

from wordshelf.application.learning.protocols.speech_synthesizer import (
    SpeechSynthesizerProtocol,
)
from wordshelf.domain.common.value_objects.ids import VocabItemId
from wordshelf.domain.vocabulary.entities import VocabItem

logger = structlog.get_logger(__name__)

DEFAULT_SENTENCE_LANG = "en-US"
DEFAULT_TRANSLATION_LANG = "zh-TW"


class PlayMode(str, Enum):
    SINGLE = "single"  # first example of each item
    ALL = "all"  # every example of each item


class LanguageMode(str, Enum):
    ENGLISH = "english"
    BOTH = "both"  # sentence followed by its translation


@dataclass(frozen=True)
class Utterance:
    text: str
    lang: str
    vocab_item_id: VocabItemId
    example_index: int
    is_translation: bool = False


ProgressCallback = Callable[[int, Utterance], None]


def build_playlist(
    items: Sequence[VocabItem],
    play_mode: PlayMode = PlayMode.SINGLE,
    language_mode: LanguageMode = LanguageMode.ENGLISH,
    sentence_lang: str = DEFAULT_SENTENCE_LANG,
    translation_lang: str = DEFAULT_TRANSLATION_LANG,
) -> list[Utterance]:
    """
    Lay out what to speak, in order, for the given items.

    A translation is only included right after its own sentence, and only
    when language_mode is BOTH.
    """
    playlist: list[Utterance] = []
    for item in items:
        examples = item.examples[:1] if play_mode == PlayMode.SINGLE else item.examples
        for index, example in enumerate(examples):
            playlist.append(
                Utterance(
                    text=example.sentence,
                    lang=sentence_lang,
                    vocab_item_id=item.id,
                    example_index=index,
                )
            )
            if language_mode == LanguageMode.BOTH and example.translation:
                playlist.append(
                    Utterance(
                        text=example.translation,
                        lang=translation_lang,
                        vocab_item_id=item.id,
                        example_index=index,
                        is_translation=True,
                    )
                )
    return playlist


class ReadAloudPlayer:
    """
    Speaks a playlist sequentially.

    stop() takes effect immediately: the utterance being spoken is cancelled
    and the rest of the playlist is dropped. There is no timeout on a single
    utterance.
    """

    def __init__(self, synthesizer: SpeechSynthesizerProtocol) -> None:
        self.synthesizer = synthesizer
        self._current: asyncio.Future[None] | None = None
        self._generation = 0
        self._playing = False

    @property
    def is_playing(self) -> bool:
        return self._playing

    async def play(
        self,
        utterances: Sequence[Utterance],
        on_progress: ProgressCallback | None = None,
    ) -> int:
        """
        Speak utterances in order.

        Starting a new playlist stops the one in progress.

        Args:
            utterances: What to speak
            on_progress: Called with (completed count, utterance) after each utterance

        Returns:
            Number of utterances spoken to completion
        """
        if self._playing:
            self.stop()

        generation = self._generation
        self._playing = True
        completed = 0
        try:
            for utterance in utterances:
                if generation != self._generation:
                    break
                current = asyncio.ensure_future(
                    self.synthesizer.speak(utterance.text, utterance.lang)
                )
                self._current = current
                try:
                    await current
                except asyncio.CancelledError:
                    if generation != self._generation:
                        break
                    raise
                finally:
                    if self._current is current:
                        self._current = None

                completed += 1
                if on_progress is not None:
                    on_progress(completed, utterance)
        finally:
            if generation == self._generation:
                self._playing = False

        logger.debug(
            "read_aloud_finished",
            completed=completed,
            total=len(utterances),
            stopped=generation != self._generation,
        )
        return completed

    def stop(self) -> None:
        """Cancel the current utterance and discard the queue."""
        self._generation += 1
        self._playing = False
        if self._current is not None and not self._current.done():
            self._current.cancel()
        self._current = None
