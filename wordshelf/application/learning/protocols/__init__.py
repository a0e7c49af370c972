from .mastery_repository import MasteryRepositoryProtocol
from .speech_synthesizer import SpeechSynthesizerProtocol

__all__ = ["MasteryRepositoryProtocol", "SpeechSynthesizerProtocol"]
