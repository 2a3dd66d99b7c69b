"""Conversation aggregate."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from gqlchat.domain.chat.entities.message import Message
from gqlchat.domain.chat.events import MemberAdded, MessagePublished
from gqlchat.domain.chat.value_objects import MessageContent
from gqlchat.domain.common.aggregate_root import AggregateRoot
from gqlchat.domain.common.entity import new_id
from gqlchat.domain.common.value_objects.ids import ConversationId, UserId


@dataclass(eq=False)
class Conversation(AggregateRoot[ConversationId]):
    """
    A conversation between users.

    Business Rules:
    - Owns its messages, in publication order
    - Members are kept in the order they were added
    - Members and messages are only ever appended
    - The member list is not deduplicated
    - Authors do not have to be members
    """

    id: ConversationId
    members: list[UserId] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)

    def add_member(self, user_id: UserId) -> None:
        """Append a member to the conversation."""
        self.members.append(user_id)
        self._record_event(MemberAdded(conversation_id=self.id, user_id=user_id))

    def has_member(self, user_id: UserId) -> bool:
        return user_id in self.members

    def publish_message(self, author_id: UserId, content: MessageContent) -> Message:
        """
        Publish a new message at the end of the conversation.

        Args:
            author_id: Identifier of the author
            content: Validated message text

        Returns:
            The appended message
        """
        message = Message.compose(author_id, content)
        self.messages.append(message)
        self._record_event(
            MessagePublished(
                conversation_id=self.id,
                message_id=message.id,
                author_id=author_id,
                content=content.value,
            )
        )
        return message

    @classmethod
    def start(cls, members: Iterable[UserId] = ()) -> "Conversation":
        """
        Start a new conversation with a fresh identifier.

        Args:
            members: Initial members, in order

        Returns:
            New Conversation instance with no messages
        """
        return cls(id=new_id(ConversationId), members=list(members))
