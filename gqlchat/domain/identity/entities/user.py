"""User aggregate for identity management."""

from dataclasses import dataclass

from gqlchat.domain.common.aggregate_root import AggregateRoot
from gqlchat.domain.common.entity import new_id
from gqlchat.domain.common.exceptions import AuthenticationError
from gqlchat.domain.common.value_objects.display_name import DisplayName
from gqlchat.domain.common.value_objects.ids import UserId
from gqlchat.domain.identity.value_objects import Email, Password, Token


@dataclass(eq=False)
class User(AggregateRoot[UserId]):
    """
    User account that can log in and take part in conversations.

    Business Rules:
    - Email must be unique (enforced by the registration use case)
    - Authentication compares passwords by value and hands back a token
      derived from the stored password
    """

    id: UserId
    email: Email
    password: Password
    name: DisplayName

    def authenticate(self, candidate: Password) -> Token:
        """
        Check a candidate password against the stored one.

        Args:
            candidate: Password supplied at login

        Returns:
            Token derived from the stored password

        Raises:
            AuthenticationError: If the passwords differ
        """
        if candidate != self.password:
            raise AuthenticationError
        return Token.from_password(self.password)

    def holds_token(self, token: Token) -> bool:
        """Check whether ``token`` is the one this account's password yields."""
        return Token.from_password(self.password) == token

    @classmethod
    def register(cls, email: Email, password: Password, name: DisplayName) -> "User":
        """
        Create a new account with a fresh identifier.

        Args:
            email: Account email address
            password: Account password
            name: Name shown to other users

        Returns:
            New User instance
        """
        return cls(id=new_id(UserId), email=email, password=password, name=name)
