from .password_service import PasswordServiceProtocol
from .user_repository import UserRepositoryProtocol

__all__ = [
    "PasswordServiceProtocol",
    "UserRepositoryProtocol",
]
