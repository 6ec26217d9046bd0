"""Use case for getting a user by ID (bearer resolution and /auth/me)."""

from mindweave.application.identity.protocols.user_repository import UserRepositoryProtocol
from mindweave.domain.common.value_objects.ids import UserId
from mindweave.domain.identity.entities.user import User
from mindweave.domain.identity.exceptions import UserNotFoundError


class GetUserByIdUseCase:
    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no profile is stored for the ID
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user
