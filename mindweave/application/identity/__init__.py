"""Identity application layer."""

from mindweave.application.identity.use_cases.get_user_by_id_use_case import GetUserByIdUseCase
from mindweave.application.identity.use_cases.register_user_use_case import RegisterUserUseCase

__all__ = [
    "GetUserByIdUseCase",
    "RegisterUserUseCase",
]
