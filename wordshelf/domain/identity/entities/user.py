"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime

from wordshelf.domain.common.entity import Entity
from wordshelf.domain.common.exceptions import ValidationError
from wordshelf.domain.common.value_objects.ids import UserId

MAX_EMAIL_LENGTH = 100


def _validate_email(email: str) -> None:
    if not email or not email.strip():
        raise ValidationError("Email cannot be empty", field="email", value=email)
    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            f"Email cannot exceed {MAX_EMAIL_LENGTH} characters", field="email", value=email
        )


@dataclass
class User(Entity[UserId]):
    """
    An account that owns vocab items, word-books and mastery records.

    Business Rules:
    - Email must be unique (enforced at repository level)
    - Email must be non-empty and at most MAX_EMAIL_LENGTH characters
    """

    id: UserId
    email: str
    hashed_password: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        _validate_email(self.email)

    @classmethod
    def create(cls, email: str, hashed_password: str | None = None) -> "User":
        """Create a new user (ID will be 0 until persisted)."""
        return cls(id=UserId.generate(), email=email.strip(), hashed_password=hashed_password)

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        hashed_password: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            email=email,
            hashed_password=hashed_password,
            created_at=created_at,
            updated_at=updated_at,
        )
