"""Message entity owned by a conversation."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from gqlchat.domain.chat.value_objects import MessageContent
from gqlchat.domain.common.entity import Entity, new_id
from gqlchat.domain.common.value_objects.ids import MessageId, UserId


@dataclass(eq=False)
class Message(Entity[MessageId]):
    """
    A message published in a conversation.

    Business Rules:
    - Belongs to exactly one conversation and is only saved through it
    - References its author by identifier only
    """

    id: MessageId
    author_id: UserId
    content: MessageContent
    published_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_authored_by(self, user_id: UserId) -> bool:
        return self.author_id == user_id

    @classmethod
    def compose(cls, author_id: UserId, content: MessageContent) -> "Message":
        """Create a new message with a fresh identifier."""
        return cls(id=new_id(MessageId), author_id=author_id, content=content)
