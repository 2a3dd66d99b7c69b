"""Read-side use case for conversations."""

from gqlchat.application.chat.protocols.conversation_store import ConversationStoreProtocol
from gqlchat.application.chat.use_cases._lookups import load_conversation
from gqlchat.domain.chat.entities.conversation import Conversation
from gqlchat.domain.chat.entities.message import Message
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.common.value_objects.ids import UserId


class ConversationQueryUseCase:
    """Read-side use case for conversations."""

    def __init__(self, conversation_store: ConversationStoreProtocol) -> None:
        """Initialize use case with dependencies."""
        self.conversation_store = conversation_store

    def get_conversation(self, conversation_id: str) -> Conversation:
        """
        Raises:
            ConversationNotFoundError: If the conversation does not exist
        """
        return load_conversation(self.conversation_store, conversation_id)

    def list_for_member(self, user_id: str) -> list[Conversation]:
        """Conversations the user is a member of, in no particular order."""
        return self.conversation_store.find_by_member(deserialize(UserId, user_id))

    def list_messages(self, conversation_id: str) -> list[Message]:
        """Messages of a conversation in publication order."""
        return list(load_conversation(self.conversation_store, conversation_id).messages)
