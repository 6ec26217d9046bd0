from .get_user_by_id_use_case import GetUserByIdUseCase
from .register_user_use_case import RegisterUserUseCase

__all__ = [
    "GetUserByIdUseCase",
    "RegisterUserUseCase",
]
