from .authenticate_user_use_case import AuthenticateUserUseCase
from .get_current_user_use_case import GetCurrentUserUseCase
from .get_user_use_case import GetUserUseCase
from .register_user_use_case import RegisterUserUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "GetCurrentUserUseCase",
    "GetUserUseCase",
    "RegisterUserUseCase",
]
