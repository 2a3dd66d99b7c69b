"""Identity domain layer."""

from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.exceptions import (
    EmailAlreadyRegisteredError,
    PasswordAlreadyInUseError,
    UserNotFoundError,
)
from gqlchat.domain.identity.value_objects import Email, Password, Token

__all__ = [
    "Email",
    "EmailAlreadyRegisteredError",
    "Password",
    "PasswordAlreadyInUseError",
    "Token",
    "User",
    "UserNotFoundError",
]
