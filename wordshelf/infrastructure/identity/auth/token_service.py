"""Token creation and verification service."""

from datetime import UTC, datetime, timedelta

import jwt
from jwt import InvalidTokenError
from pydantic import BaseModel

from wordshelf.config import get_settings

settings = get_settings()
SECRET_KEY = settings.SECRET_KEY
REFRESH_TOKEN_SECRET_KEY = settings.REFRESH_TOKEN_SECRET_KEY or SECRET_KEY
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES
REFRESH_TOKEN_EXPIRE_DAYS = settings.REFRESH_TOKEN_EXPIRE_DAYS


class TokenWithRefresh(BaseModel):
    """DTO for token pair with access and refresh tokens."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int


def _encode(user_id: int, token_type: str, lifetime: timedelta, key: str) -> str:
    payload = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + lifetime,
        "type": token_type,
    }
    return jwt.encode(payload, key, algorithm=ALGORITHM)


def _decode_user_id(token: str, key: str, expected_type: str) -> int | None:
    try:
        payload = jwt.decode(token, key, algorithms=[ALGORITHM])
        if payload.get("type") != expected_type:
            return None
        user_id = payload.get("sub")
        if user_id is None:
            return None
        return int(user_id)
    except (InvalidTokenError, ValueError):
        return None


def create_access_token(user_id: int) -> str:
    return _encode(user_id, "access", timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES), SECRET_KEY)


def create_refresh_token(user_id: int) -> str:
    return _encode(
        user_id, "refresh", timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS), REFRESH_TOKEN_SECRET_KEY
    )


def verify_access_token(token: str) -> int | None:
    """Return the user id of a valid access token. Refresh tokens are rejected."""
    return _decode_user_id(token, SECRET_KEY, "access")


def verify_refresh_token(token: str) -> int | None:
    """Return the user id of a valid refresh token."""
    return _decode_user_id(token, REFRESH_TOKEN_SECRET_KEY, "refresh")


def create_token_pair(user_id: int) -> TokenWithRefresh:
    """Create a token pair (access + refresh) for a user."""
    return TokenWithRefresh(
        access_token=create_access_token(user_id),
        refresh_token=create_refresh_token(user_id),
        token_type="bearer",  # noqa: S106
        expires_in=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
