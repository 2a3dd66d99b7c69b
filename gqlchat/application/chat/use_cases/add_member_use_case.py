"""Use case for adding a member to a conversation."""

import structlog

from gqlchat.application.chat.protocols.conversation_store import ConversationStoreProtocol
from gqlchat.application.chat.use_cases._lookups import existing_user_id, load_conversation
from gqlchat.application.common.event_publisher import EventPublisherProtocol
from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.chat.entities.conversation import Conversation

logger = structlog.get_logger(__name__)


class AddMemberUseCase:
    """Use case for adding a member to a conversation."""

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

    def add_member(self, conversation_id: str, user_id: str) -> Conversation:
        """
        Add a user to a conversation.

        Adding someone who is already a member appends them again.

        Raises:
            ConversationNotFoundError: If the conversation does not exist
            UserNotFoundError: If the user does not exist
        """
        conversation = load_conversation(self.conversation_store, conversation_id)
        member_id = existing_user_id(self.user_store, user_id)

        conversation.add_member(member_id)
        self.conversation_store.save(conversation)
        self.event_publisher.publish_many(conversation.collect_events())

        logger.info("member_added", conversation_id=conversation_id, user_id=user_id)

        return conversation
