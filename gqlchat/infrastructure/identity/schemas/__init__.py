"""Identity context schemas."""

from gqlchat.infrastructure.identity.schemas.user_schemas import SessionProjection, UserProjection

__all__ = ["SessionProjection", "UserProjection"]
