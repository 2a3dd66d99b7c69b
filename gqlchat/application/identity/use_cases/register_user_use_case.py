"""Use case for registering a new user account."""

import structlog

from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.common.value_objects.display_name import DisplayName
from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.exceptions import (
    EmailAlreadyRegisteredError,
    PasswordAlreadyInUseError,
)
from gqlchat.domain.identity.value_objects import Email, Password, Token

logger = structlog.get_logger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user account."""

    def __init__(self, user_store: UserStoreProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_store = user_store

    def register(self, email: str, password: str, name: str) -> User:
        """
        Register a new account.

        Args:
            email: Email address (must be unique)
            password: Plain password
            name: Display name

        Returns:
            The saved user

        Raises:
            ValidationError: If any argument is malformed
            EmailAlreadyRegisteredError: If the email is taken
            PasswordAlreadyInUseError: If another account would share the token
        """
        user_email = deserialize(Email, email)
        user_password = deserialize(Password, password)
        user_name = deserialize(DisplayName, name)

        if self.user_store.find_by_email(user_email) is not None:
            raise EmailAlreadyRegisteredError(email)

        # Tokens are derived from passwords, so one password maps to one account.
        if self.user_store.find_by_token(Token.from_password(user_password)) is not None:
            raise PasswordAlreadyInUseError()

        user = self.user_store.save(User.register(user_email, user_password, user_name))

        logger.info("user_registered", user_id=user.identity, email=email)

        return user
