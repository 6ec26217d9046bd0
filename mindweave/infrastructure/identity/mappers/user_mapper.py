"""Mapper for User ORM ↔ Domain conversion."""

from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.identity.entities.user import User
from mindweave.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User.create_with_id(
            id=UserId(orm_model.id),
            email=orm_model.email,
            display_name=orm_model.display_name,
            hashed_password=orm_model.hashed_password,
            subscription=orm_model.subscription,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User) -> UserORM:
        """Convert a new domain entity to an ORM model."""
        return UserORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            email=domain_entity.email,
            display_name=domain_entity.display_name,
            hashed_password=domain_entity.hashed_password,
            subscription=domain_entity.subscription,
        )
