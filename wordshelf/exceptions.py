"""Custom exception hierarchy for the wordshelf application."""

from fastapi import HTTPException
from starlette import status


class WordshelfError(Exception):
    """Base exception for all wordshelf errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(WordshelfError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class VocabItemNotFoundError(NotFoundError):
    """Vocab item not found error."""

    def __init__(self, vocab_item_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with vocab item ID or custom message."""
        self.vocab_item_id = vocab_item_id
        if message:
            super().__init__(message)
        elif vocab_item_id is not None:
            super().__init__(f"Vocab item with id {vocab_item_id} not found")
        else:
            super().__init__("Vocab item not found")


class WordBookNotFoundError(NotFoundError):
    """Word-book not found error."""

    def __init__(self, book_id: int) -> None:
        self.book_id = book_id
        super().__init__(f"Word-book with id {book_id} not found")


class MasteryRecordNotFoundError(NotFoundError):
    """No quiz progress has been recorded for the item."""

    def __init__(self, vocab_item_id: int) -> None:
        self.vocab_item_id = vocab_item_id
        super().__init__(f"No mastery record for vocab item {vocab_item_id}")


class QuizSessionNotFoundError(NotFoundError):
    """Quiz session not found, expired, or owned by another user."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Quiz session {session_id} not found")


class ValidationError(WordshelfError):
    """Validation error."""


class ServiceError(WordshelfError):
    """Service layer error."""


class CollaboratorUnavailableError(ServiceError):
    """A backing service (database, word-info lookup) failed."""

    def __init__(self, collaborator: str, reason: str | None = None) -> None:
        self.collaborator = collaborator
        self.reason = reason
        message = f"{collaborator} is currently unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, status_code=503)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
