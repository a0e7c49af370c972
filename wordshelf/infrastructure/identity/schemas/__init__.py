"""Identity context schemas."""

from wordshelf.infrastructure.identity.schemas.user_schemas import (
    UserDetailsResponse,
    UserRegisterRequest,
)

__all__ = [
    "UserDetailsResponse",
    "UserRegisterRequest",
]
