"""Identity domain layer."""

from mindweave.domain.identity.entities.user import User
from mindweave.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    RegistrationDisabledError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "RegistrationDisabledError",
    "User",
    "UserNotFoundError",
]
