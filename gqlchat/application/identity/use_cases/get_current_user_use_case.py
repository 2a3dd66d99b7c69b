"""Use case for resolving the user behind a session token (the ``me`` query)."""

import structlog

from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.value_objects import Token

logger = structlog.get_logger(__name__)


class GetCurrentUserUseCase:
    """Use case for resolving the user behind a session token."""

    def __init__(self, user_store: UserStoreProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_store = user_store

    def get_current_user(self, token: str | None) -> User | None:
        """
        Find the user a token belongs to.

        Anonymous callers are not an error: a missing, empty or unknown
        token yields None.
        """
        if not token:
            return None
        try:
            session_token = deserialize(Token, token)
        except ValidationError:
            return None

        user = self.user_store.find_by_token(session_token)
        if user is None:
            logger.debug("unknown_session_token")
        return user
