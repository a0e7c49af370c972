from .mastery_tracker import MasteryTracker
from .question_generator import QuestionGenerator, blank_headword

__all__ = ["MasteryTracker", "QuestionGenerator", "blank_headword"]
