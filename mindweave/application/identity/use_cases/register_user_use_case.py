"""Use case for user registration."""

import structlog

from mindweave.application.common.unit_of_work import UnitOfWork
from mindweave.application.identity.protocols.password_service import PasswordServiceProtocol
from mindweave.application.identity.protocols.user_repository import UserRepositoryProtocol
from mindweave.domain.identity.entities.user import User
from mindweave.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    RegistrationDisabledError,
)
from mindweave.feature_flags import is_user_registrations_enabled

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for user registration operations."""

    def __init__(
        self,
        user_repository: UserRepositoryProtocol,
        password_service: PasswordServiceProtocol,
        uow: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.user_repository = user_repository
        self.password_service = password_service
        self.uow = uow

    def register_user(self, email: str, password: str, display_name: str) -> User:
        """
        Register a new user profile.

        Args:
            email: User's email address
            password: User's plain text password (will be hashed)
            display_name: Name shown in the UI

        Returns:
            The stored user, on the free subscription

        Raises:
            RegistrationDisabledError: If registration is disabled via feature flag
            EmailAlreadyExistsError: If email is already registered
            ValidationError: If email or display name is invalid
        """
        if not is_user_registrations_enabled():
            raise RegistrationDisabledError

        user = User.create(
            email=email,
            display_name=display_name,
            hashed_password=self.password_service.hash_password(password),
        )
        if self.user_repository.find_by_email(user.email) is not None:
            raise EmailAlreadyExistsError(user.email)

        with self.uow:
            user = self.user_repository.add(user)
            self.uow.commit()

        logger.info("user_registered", user_id=user.id.value, email=user.email)

        return user
