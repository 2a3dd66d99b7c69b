from typing import Protocol

from gqlchat.application.common.store import StoreProtocol
from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.value_objects import Email, Token


class UserStoreProtocol(StoreProtocol[User], Protocol):
    def find_by_email(self, email: Email) -> User | None: ...

    def find_by_token(self, token: Token) -> User | None: ...
