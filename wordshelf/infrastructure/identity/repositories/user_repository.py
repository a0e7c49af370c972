"""Repository for User domain entities."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from wordshelf.domain.common.value_objects.ids import UserId
from wordshelf.domain.identity.entities.user import User
from wordshelf.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from wordshelf.infrastructure.identity.mappers.user_mapper import UserMapper
from wordshelf.models import User as UserORM

logger = structlog.get_logger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Raises:
            EmailAlreadyExistsError: If email is already registered (for new users)
        """
        if not user.id.is_persisted:
            try:
                orm_model = self.mapper.to_orm(user)
                self.db.add(orm_model)
                self.db.commit()
                self.db.refresh(orm_model)
            except IntegrityError as e:
                self.db.rollback()
                if "email" in str(e.orig):
                    raise EmailAlreadyExistsError(user.email) from e
                raise
            logger.info("user_created", user_id=orm_model.id)
            return self.mapper.to_domain(orm_model)

        stmt = select(UserORM).where(UserORM.id == user.id.value)
        existing = self.db.execute(stmt).scalar_one_or_none()
        if not existing:
            raise UserNotFoundError(user.id.value)

        orm_model = self.mapper.to_orm(user, existing)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
