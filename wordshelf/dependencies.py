"""FastAPI dependencies for the application."""

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from fastapi import HTTPException, status

from wordshelf.feature_flags import is_ai_enabled

F = TypeVar("F", bound=Callable[..., Any])

AI_DISABLED_DETAIL = "AI features are not enabled on this server"


def ensure_ai_enabled() -> None:
    """
    Raises:
        HTTPException: 410 Gone if AI features are disabled
    """
    if not is_ai_enabled():
        raise HTTPException(status_code=status.HTTP_410_GONE, detail=AI_DISABLED_DETAIL)


def require_ai_enabled(func: F) -> F:
    """
    Decorator that requires AI to be enabled for the endpoint.

    Usage:
        @router.post("/endpoint")
        @require_ai_enabled
        async def my_endpoint():
            ...
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        ensure_ai_enabled()
        return await func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
