"""Chat domain layer."""

from gqlchat.domain.chat.entities import Conversation, Message
from gqlchat.domain.chat.events import MemberAdded, MessagePublished
from gqlchat.domain.chat.exceptions import ConversationNotFoundError
from gqlchat.domain.chat.value_objects import MAX_MESSAGE_LENGTH, MessageContent

__all__ = [
    "MAX_MESSAGE_LENGTH",
    "Conversation",
    "ConversationNotFoundError",
    "MemberAdded",
    "Message",
    "MessageContent",
    "MessagePublished",
]
