"""Chat context schemas."""

from gqlchat.infrastructure.chat.schemas.conversation_schemas import (
    ConversationProjection,
    MessageProjection,
)

__all__ = ["ConversationProjection", "MessageProjection"]
