"""Example sentence value object."""

from dataclasses import dataclass

from wordshelf.domain.common.exceptions import ValidationError
from wordshelf.domain.common.value_object import ValueObject

MAX_EXAMPLES = 3


@dataclass(frozen=True)
class ExampleSentence(ValueObject):
    """An example sentence with its optional translation and source."""

    sentence: str
    translation: str | None = None
    source: str | None = None

    def __post_init__(self) -> None:
        if not self.sentence or not self.sentence.strip():
            raise ValidationError("Example sentence cannot be empty", field="sentence")
