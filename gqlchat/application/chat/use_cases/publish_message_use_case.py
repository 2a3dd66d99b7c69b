"""Use case for publishing a message in a conversation."""

import structlog

from gqlchat.application.chat.protocols.conversation_store import ConversationStoreProtocol
from gqlchat.application.chat.use_cases._lookups import existing_user_id, load_conversation
from gqlchat.application.common.event_publisher import EventPublisherProtocol
from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.chat.entities.message import Message
from gqlchat.domain.chat.value_objects import MessageContent
from gqlchat.domain.common.value_object import deserialize

logger = structlog.get_logger(__name__)


class PublishMessageUseCase:
    """Use case for publishing a message in a conversation."""

    def __init__(
        self,
        conversation_store: ConversationStoreProtocol,
        user_store: UserStoreProtocol,
        event_publisher: EventPublisherProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.conversation_store = conversation_store
        self.user_store = user_store
        self.event_publisher = event_publisher

    def publish(self, conversation_id: str, author_id: str, content: str) -> Message:
        """
        Publish a message and notify subscribers.

        The conversation is saved before any subscriber hears about
        the message.

        Args:
            conversation_id: Target conversation
            author_id: Identifier of the author
            content: Message text (max 100 characters)

        Returns:
            The published message

        Raises:
            ValidationError: If the content or an identifier is malformed
            ConversationNotFoundError: If the conversation does not exist
            UserNotFoundError: If the author does not exist
        """
        message_content = deserialize(MessageContent, content)
        conversation = load_conversation(self.conversation_store, conversation_id)
        author = existing_user_id(self.user_store, author_id)

        message = conversation.publish_message(author, message_content)
        self.conversation_store.save(conversation)
        self.event_publisher.publish_many(conversation.collect_events())

        logger.info(
            "message_published",
            conversation_id=conversation_id,
            message_id=message.identity,
            author_id=author_id,
        )

        return message
