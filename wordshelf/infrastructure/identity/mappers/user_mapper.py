"""Mapper for User ORM and domain conversion."""

from wordshelf.domain.common.value_objects.ids import UserId
from wordshelf.domain.identity.entities.user import User
from wordshelf.models import User as UserORM


class UserMapper:
    def to_domain(self, orm_model: UserORM) -> User:
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            hashed_password=orm_model.hashed_password,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        if orm_model:
            orm_model.email = domain_entity.email
            orm_model.hashed_password = domain_entity.hashed_password
            return orm_model

        return UserORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            email=domain_entity.email,
            hashed_password=domain_entity.hashed_password,
        )
