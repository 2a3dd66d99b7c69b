"""Mapper for Conversation domain → projection conversion."""

from gqlchat.domain.chat.entities.conversation import Conversation
from gqlchat.domain.chat.entities.message import Message
from gqlchat.domain.chat.events import MessagePublished
from gqlchat.infrastructure.chat.schemas import ConversationProjection, MessageProjection


class ConversationMapper:
    """Mapper for Conversation domain → projection conversion."""

    def message_to_projection(self, message: Message) -> MessageProjection:
        return MessageProjection(
            id=message.identity,
            author_id=message.author_id.value,
            content=message.content.value,
            published_at=message.published_at,
        )

    def event_to_projection(self, event: MessagePublished) -> MessageProjection:
        """Build the payload pushed to subscribers of a conversation."""
        return MessageProjection(
            id=event.message_id.value,
            author_id=event.author_id.value,
            content=event.content,
            published_at=event.occurred_at,
        )

    def to_projection(self, conversation: Conversation) -> ConversationProjection:
        return ConversationProjection(
            id=conversation.identity,
            members=[member.value for member in conversation.members],
            messages=[self.message_to_projection(m) for m in conversation.messages],
        )
