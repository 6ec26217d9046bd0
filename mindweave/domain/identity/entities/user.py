"""User profile entity."""

from dataclasses import dataclass
from datetime import datetime

from mindweave.domain.common.entity import Entity
from mindweave.domain.common.exceptions import ValidationError
from mindweave.domain.common.value_objects.ids import UserId

FIELD_LIMITS = {"email": 100, "display_name": 100}
FREE_SUBSCRIPTION = "free"


def _require_text(field: str, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f"{field.replace('_', ' ').capitalize()} cannot be empty", field)
    if len(value) > FIELD_LIMITS[field]:
        raise ValidationError(
            f"{field.replace('_', ' ').capitalize()} cannot exceed "
            f"{FIELD_LIMITS[field]} characters",
            field,
        )


@dataclass
class User(Entity[UserId]):
    """
    Owner of sources, aids and progress entries.

    Email uniqueness is enforced by the repository. The password hash is
    opaque here: hashing belongs to the password service.
    """

    id: UserId
    email: str
    display_name: str
    hashed_password: str | None = None
    subscription: str = FREE_SUBSCRIPTION
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        _require_text("email", self.email)
        _require_text("display_name", self.display_name)

    @classmethod
    def create(cls, email: str, display_name: str, hashed_password: str | None = None) -> "User":
        """New profile on the free subscription, email normalized to lower case."""
        return cls(
            id=UserId.generate(),
            email=email.strip().lower(),
            display_name=display_name.strip(),
            hashed_password=hashed_password,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        email: str,
        display_name: str,
        hashed_password: str | None,
        subscription: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            display_name=display_name,
            hashed_password=hashed_password,
            subscription=subscription,
            created_at=created_at,
            updated_at=updated_at,
        )
