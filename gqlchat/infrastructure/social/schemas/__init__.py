"""Social context schemas."""

from gqlchat.infrastructure.social.schemas.social_schemas import CarProjection, PersonProjection

__all__ = ["CarProjection", "PersonProjection"]
