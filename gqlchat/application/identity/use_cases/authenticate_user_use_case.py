"""Use case for authenticating a user with email and password."""

import structlog

from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.common.exceptions import AuthenticationError
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.value_objects import Email, Password, Token

logger = structlog.get_logger(__name__)


class AuthenticateUserUseCase:
    """Use case for authenticating a user with email and password."""

    def __init__(self, user_store: UserStoreProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_store = user_store

    def authenticate(self, email: str, password: str) -> tuple[User, Token]:
        """
        Authenticate a user with email and password.

        Args:
            email: User's email address
            password: User's plain text password

        Returns:
            Tuple of (authenticated user, session token)

        Raises:
            ValidationError: If the email or password is malformed
            AuthenticationError: If credentials are invalid
        """
        user = self.user_store.find_by_email(deserialize(Email, email))
        if user is None:
            logger.info("authentication_failed", email=email, reason="unknown_email")
            raise AuthenticationError

        try:
            token = user.authenticate(deserialize(Password, password))
        except AuthenticationError:
            logger.info("authentication_failed", user_id=user.identity, reason="wrong_password")
            raise

        logger.info("user_authenticated", user_id=user.identity, email=email)

        return user, token
