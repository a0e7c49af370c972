"""Vocabulary domain exceptions."""

from wordshelf.domain.common.exceptions import DomainError


class DuplicateHeadwordError(DomainError):
    """Raised when the user already has a vocab item with the same headword."""

    def __init__(self, front: str) -> None:
        super().__init__(f"A vocab item for '{front}' already exists", {"front": front})
        self.front = front
