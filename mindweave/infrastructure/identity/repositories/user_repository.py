"""Repository for User domain entities."""

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.identity.entities.user import User
from mindweave.domain.identity.exceptions import EmailAlreadyExistsError
from mindweave.infrastructure.identity.mappers.user_mapper import UserMapper
from mindweave.models import User as UserORM

logger = structlog.get_logger(__name__)


class UserRepository:
    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def _find_one(self, *criteria: object) -> User | None:
        orm_model = self.db.execute(select(UserORM).where(*criteria)).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id(self, user_id: UserId) -> User | None:
        return self._find_one(UserORM.id == user_id.value)

    def find_by_email(self, email: str) -> User | None:
        """Look up by an already normalized (lower-cased) email."""
        return self._find_one(UserORM.email == email)

    def add(self, user: User) -> User:
        """
        Stage a new user and return it with its database id.

        Raises:
            EmailAlreadyExistsError: If the email is taken (unique constraint)
        """
        orm_model = self.mapper.to_orm(user)
        self.db.add(orm_model)
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if "email" in str(e.orig):
                raise EmailAlreadyExistsError(user.email) from e
            raise
        self.db.refresh(orm_model)
        logger.info("user_created", user_id=orm_model.id)
        return self.mapper.to_domain(orm_model)
