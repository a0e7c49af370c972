"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from wordshelf.core import container
from wordshelf.database import DatabaseSession
from wordshelf.domain.identity.entities.user import User
from wordshelf.domain.identity.exceptions import UserNotFoundError
from wordshelf.exceptions import CredentialsException
from wordshelf.infrastructure.identity.auth.token_service import verify_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)], db: DatabaseSession
) -> User:
    """
    Get the current authenticated user from the access token.

    Raises:
        CredentialsException: If token is invalid or user not found
    """
    user_id = verify_access_token(token)
    if user_id is None:
        raise CredentialsException

    container.db.override(db)
    try:
        use_case = container.authentication_use_case()
        return use_case.get_user_by_id(user_id)
    except UserNotFoundError:
        raise CredentialsException from None
    finally:
        container.db.reset_override()
