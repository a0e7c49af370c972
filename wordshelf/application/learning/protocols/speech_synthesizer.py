from typing import Protocol


class SpeechSynthesizerProtocol(Protocol):
    """A text-to-speech engine. speak() returns once the utterance has finished playing."""

    async def speak(self, text: str, lang: str) -> None: ...
