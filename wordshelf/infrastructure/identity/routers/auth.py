"""Login, token refresh and logout."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import BaseModel
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette import status

from wordshelf.application.identity.use_cases.authentication_use_case import (
    AuthenticationUseCase,
)
from wordshelf.config import get_settings
from wordshelf.core import container
from wordshelf.domain.identity.exceptions import InvalidCredentialsError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.auth.token_service import (
    REFRESH_TOKEN_EXPIRE_DAYS,
    TokenWithRefresh,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
limiter = Limiter(key_func=get_remote_address)
settings = get_settings()

REFRESH_COOKIE = "refresh_token"


class RefreshTokenRequest(BaseModel):
    """Body for clients that cannot keep the refresh cookie."""

    refresh_token: str | None = None


def _cookie_options() -> dict[str, Any]:
    # Only the auth routes ever see the refresh cookie
    return {
        "httponly": True,
        "secure": settings.COOKIE_SECURE,
        "samesite": "strict",
        "path": f"{settings.API_V1_PREFIX}/auth",
    }


def set_refresh_cookie(response: Response, refresh_token: str) -> None:
    response.set_cookie(
        key=REFRESH_COOKIE,
        value=refresh_token,
        max_age=REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
        **_cookie_options(),
    )


def clear_refresh_cookie(response: Response) -> None:
    response.delete_cookie(key=REFRESH_COOKIE, **_cookie_options())


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
async def login(
    request: Request,
    response: Response,
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    """
    Exchange email and password for an access/refresh token pair.

    The form's `username` field carries the email address. The refresh token
    is also set as an httpOnly cookie.
    """
    try:
        _, token_pair = use_case.authenticate_user(form_data.username, form_data.password)
    except InvalidCredentialsError:
        logger.info("Failed login attempt")
        raise _unauthorized("Incorrect email or password") from None

    set_refresh_cookie(response, token_pair.refresh_token)
    return token_pair


@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
async def refresh(
    request: Request,
    response: Response,
    body: RefreshTokenRequest | None = None,
    refresh_token: Annotated[str | None, Cookie()] = None,
    use_case: AuthenticationUseCase = Depends(inject_use_case(container.authentication_use_case)),
) -> TokenWithRefresh:
    """Issue a new token pair. The cookie is used when present, the body otherwise."""
    token = refresh_token or (body.refresh_token if body else None)
    if not token:
        raise _unauthorized("Refresh token required")

    try:
        _, token_pair = use_case.refresh_access_token(token)
    except InvalidCredentialsError:
        clear_refresh_cookie(response)
        raise _unauthorized("Invalid or expired refresh token") from None

    set_refresh_cookie(response, token_pair.refresh_token)
    return token_pair


@router.post("/logout")
async def logout(response: Response) -> dict[str, str]:
    """Clear the refresh cookie. Access tokens stay valid until they expire."""
    clear_refresh_cookie(response)
    return {"message": "Logged out successfully"}
