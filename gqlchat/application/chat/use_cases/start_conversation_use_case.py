"""Use case for starting a conversation."""

from collections.abc import Iterable

import structlog

from gqlchat.application.chat.protocols.conversation_store import ConversationStoreProtocol
from gqlchat.application.chat.use_cases._lookups import existing_user_id
from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.chat.entities.conversation import Conversation

logger = structlog.get_logger(__name__)


class StartConversationUseCase:
    """Use case for starting a conversation."""

    def __init__(
        self,
        conversation_store: ConversationStoreProtocol,
        user_store: UserStoreProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.conversation_store = conversation_store
        self.user_store = user_store

    def start(self, member_ids: Iterable[str] = ()) -> Conversation:
        """
        Start a conversation between existing users.

        Args:
            member_ids: Initial member identifiers, in order

        Returns:
            The saved conversation

        Raises:
            ValidationError: If an identifier is malformed
            UserNotFoundError: If a member does not exist
        """
        members = [existing_user_id(self.user_store, member_id) for member_id in member_ids]
        conversation = self.conversation_store.save(Conversation.start(members))

        logger.info(
            "conversation_started",
            conversation_id=conversation.identity,
            member_count=len(members),
        )

        return conversation
