from datetime import datetime

from pydantic import EmailStr, Field

from mindweave.domain.identity.entities.user import User
from mindweave.infrastructure.common.schemas import CamelModel


class UserRegisterRequest(CamelModel):
    """Schema for user registration."""

    email: EmailStr = Field(..., description="Email address for the new account")
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    display_name: str = Field(
        ..., min_length=1, max_length=100, description="Name shown in the UI"
    )


class UserProfileResponse(CamelModel):
    """Schema for returning a user profile."""

    uid: int = Field(..., description="User id")
    email: str = Field(..., description="Email address")
    display_name: str = Field(..., description="Name shown in the UI")
    subscription: str = Field(..., description="Subscription tier")
    created_at: datetime | None = Field(None, description="When the profile was created")

    @classmethod
    def from_domain(cls, user: User) -> "UserProfileResponse":
        return cls(
            uid=user.id.value,
            email=user.email,
            display_name=user.display_name,
            subscription=user.subscription,
            created_at=user.created_at,
        )
