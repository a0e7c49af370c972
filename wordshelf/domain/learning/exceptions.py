"""Learning domain exceptions."""

from wordshelf.domain.common.exceptions import DomainError


class InvalidRequiredStreakError(DomainError):
    """Raised when a required streak outside the supported range is configured."""

    def __init__(self, value: object, minimum: int, maximum: int) -> None:
        super().__init__(
            f"Required streak must be between {minimum} and {maximum}, got {value}",
            {"required_streak": value},
        )
        self.value = value


class QuestionAlreadyAnsweredError(DomainError):
    """Raised when the current quiz question is answered a second time."""

    def __init__(self, position: int) -> None:
        super().__init__("This question has already been answered", {"position": position})
        self.position = position


class QuizSessionCompleteError(DomainError):
    """Raised when answering a session that has no questions left."""

    def __init__(self) -> None:
        super().__init__("The quiz session is complete")
