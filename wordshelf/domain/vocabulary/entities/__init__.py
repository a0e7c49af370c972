from .example_sentence import MAX_EXAMPLES, ExampleSentence
from .vocab_item import DifficultyLevel, VocabItem
from .word_info import WordInfo

__all__ = ["MAX_EXAMPLES", "DifficultyLevel", "ExampleSentence", "VocabItem", "WordInfo"]
