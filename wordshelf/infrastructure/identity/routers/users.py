import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from wordshelf.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from wordshelf.core import container
from wordshelf.domain.identity.entities.user import User
from wordshelf.domain.common.exceptions import DomainError
from wordshelf.domain.identity.exceptions import EmailAlreadyExistsError
from wordshelf.exceptions import WordshelfError
from wordshelf.infrastructure.common.di import inject_use_case
from wordshelf.infrastructure.identity.auth.token_service import TokenWithRefresh
from wordshelf.infrastructure.identity.dependencies import get_current_user
from wordshelf.infrastructure.identity.routers.auth import set_refresh_cookie
from wordshelf.infrastructure.identity.schemas import (
    UserDetailsResponse,
    UserRegisterRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])
limiter = Limiter(key_func=get_remote_address)


@router.post("/register")
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request,
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> TokenWithRefresh:
    """
    Create an account and sign it in.

    Responds like /auth/login, so the client is logged in straight away.
    """
    try:
        _, token_pair = use_case.register_user(register_data.email, register_data.password)
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (WordshelfError, DomainError):
        # RegistrationDisabledError becomes a 403 in the domain error handler
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e

    set_refresh_cookie(response, token_pair.refresh_token)
    return token_pair


@router.get("/me")
async def get_me(current_user: Annotated[User, Depends(get_current_user)]) -> UserDetailsResponse:
    """Get the current user's profile information."""
    return UserDetailsResponse(email=current_user.email, id=current_user.id.value)
