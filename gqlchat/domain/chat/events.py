"""Domain events recorded by the conversation aggregate."""

from dataclasses import dataclass

from gqlchat.domain.common.domain_event import DomainEvent
from gqlchat.domain.common.value_objects.ids import ConversationId, MessageId, UserId


@dataclass(frozen=True, kw_only=True)
class MessagePublished(DomainEvent):
    conversation_id: ConversationId
    message_id: MessageId
    author_id: UserId
    content: str


@dataclass(frozen=True, kw_only=True)
class MemberAdded(DomainEvent):
    conversation_id: ConversationId
    user_id: UserId
