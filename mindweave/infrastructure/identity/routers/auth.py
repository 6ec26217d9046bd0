import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from mindweave.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from mindweave.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from mindweave.config import get_settings
from mindweave.core import container
from mindweave.domain.common.exceptions import DomainError
from mindweave.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    RegistrationDisabledError,
    UserNotFoundError,
)
from mindweave.exceptions import (
    ConflictError,
    ForbiddenError,
    MindweaveError,
    ProfileNotFoundError,
)
from mindweave.infrastructure.common.di import inject_use_case
from mindweave.infrastructure.common.schemas import ApiResponse, envelope
from mindweave.infrastructure.identity.dependencies import CurrentUserId
from mindweave.infrastructure.identity.schemas import UserProfileResponse, UserRegisterRequest

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])
limiter = Limiter(
    key_func=get_remote_address, enabled=get_settings().ENVIRONMENT != "test"
)


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")  # type: ignore[misc]
async def register(
    request: Request,
    register_data: UserRegisterRequest,
    use_case: Annotated[
        RegisterUserUseCase, Depends(inject_use_case(container.register_user_use_case))
    ],
) -> ApiResponse[UserProfileResponse]:
    """
    Register a new user profile.

    The password is hashed before storage. New profiles start on the free
    subscription.
    """
    try:
        user = use_case.register_user(
            email=register_data.email,
            password=register_data.password,
            display_name=register_data.display_name,
        )
        return envelope(UserProfileResponse.from_domain(user), "User registered successfully.")
    except RegistrationDisabledError:
        raise ForbiddenError("User registration is currently disabled") from None
    except EmailAlreadyExistsError:
        raise ConflictError("The email address is already in use by another account.") from None
    except (MindweaveError, DomainError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise MindweaveError("An unexpected error occurred. Please try again later.") from e


@router.get("/me")
async def get_me(
    user_id: CurrentUserId,
    use_case: Annotated[
        GetUserByIdUseCase, Depends(inject_use_case(container.get_user_by_id_use_case))
    ],
) -> ApiResponse[UserProfileResponse]:
    """Get the current user's profile."""
    try:
        user = use_case.get_user(user_id.value)
    except UserNotFoundError:
        raise ProfileNotFoundError from None
    return envelope(UserProfileResponse.from_domain(user), "User profile retrieved successfully.")
