"""Translate application and domain exceptions into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from wordshelf.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)
from wordshelf.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    RegistrationDisabledError,
)
from wordshelf.domain.learning.exceptions import (
    QuestionAlreadyAnsweredError,
    QuizSessionCompleteError,
)
from wordshelf.domain.vocabulary.exceptions import DuplicateHeadwordError
from wordshelf.exceptions import WordshelfError

logger = logging.getLogger(__name__)

# Most specific first; the first matching class wins
_DOMAIN_STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (RegistrationDisabledError, status.HTTP_403_FORBIDDEN),
    (DuplicateHeadwordError, status.HTTP_409_CONFLICT),
    (EmailAlreadyExistsError, status.HTTP_400_BAD_REQUEST),
    (QuestionAlreadyAnsweredError, status.HTTP_409_CONFLICT),
    (QuizSessionCompleteError, status.HTTP_409_CONFLICT),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
]


def domain_error_status(exc: DomainError) -> int:
    for error_type, status_code in _DOMAIN_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def wordshelf_error_handler(request: Request, exc: WordshelfError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = domain_error_status(exc)
    logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WordshelfError, wordshelf_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
