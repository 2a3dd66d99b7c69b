"""In-memory store for User aggregates."""

from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.value_objects import Email, Token
from gqlchat.infrastructure.common.in_memory_store import InMemoryStore


class InMemoryUserStore(InMemoryStore[User]):
    """In-memory store for User aggregates."""

    def find_by_email(self, email: Email) -> User | None:
        """Find the account registered with ``email``."""
        return self._first(lambda user: user.email == email)

    def find_by_token(self, token: Token) -> User | None:
        """Find the account whose password yields ``token``."""
        return self._first(lambda user: user.holds_token(token))
