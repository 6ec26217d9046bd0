"""Identity context schemas."""

from mindweave.infrastructure.identity.schemas.user_schemas import (
    UserProfileResponse,
    UserRegisterRequest,
)

__all__ = [
    "UserProfileResponse",
    "UserRegisterRequest",
]
