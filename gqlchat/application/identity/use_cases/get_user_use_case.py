"""Use case for getting a user by ID."""

from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.common.value_objects.ids import UserId
from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.exceptions import UserNotFoundError


class GetUserUseCase:
    """Use case for getting a user by ID."""

    def __init__(self, user_store: UserStoreProtocol) -> None:
        """Initialize use case with dependencies."""
        self.user_store = user_store

    def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_store.load(deserialize(UserId, user_id))
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> list[User]:
        return self.user_store.all()
