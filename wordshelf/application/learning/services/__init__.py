from .quiz_session_store import QuizSessionStore
from .read_aloud_player import (
    LanguageMode,
    PlayMode,
    ReadAloudPlayer,
    Utterance,
    build_playlist,
)

__all__ = [
    "LanguageMode",
    "PlayMode",
    "QuizSessionStore",
    "ReadAloudPlayer",
    "Utterance",
    "build_playlist",
]
