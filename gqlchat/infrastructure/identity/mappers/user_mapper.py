"""Mapper for User domain → projection conversion."""

from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.value_objects import Token
from gqlchat.infrastructure.identity.schemas import SessionProjection, UserProjection


class UserMapper:
    """Mapper for User domain → projection conversion."""

    def to_projection(self, user: User) -> UserProjection:
        return UserProjection(id=user.identity, email=user.email.value, name=user.name.value)

    def to_session(self, user: User, token: Token) -> SessionProjection:
        return SessionProjection(user=self.to_projection(user), token=token.value)
