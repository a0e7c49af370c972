from pydantic import BaseModel, Field

from wordshelf.domain.identity.entities.user import MAX_EMAIL_LENGTH


class UserDetailsResponse(BaseModel):
    """Schema for returning user details."""

    id: int = Field(..., description="User id")
    email: str = Field(..., description="User email")


class UserRegisterRequest(BaseModel):
    """Schema for user registration."""

    email: str = Field(
        ..., min_length=3, max_length=MAX_EMAIL_LENGTH, description="Email for the new account"
    )
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
