"""In-memory store for Conversation aggregates."""

from gqlchat.domain.chat.entities.conversation import Conversation
from gqlchat.domain.common.value_objects.ids import UserId
from gqlchat.infrastructure.common.in_memory_store import InMemoryStore


class InMemoryConversationStore(InMemoryStore[Conversation]):
    """In-memory store for Conversation aggregates."""

    def find_by_member(self, user_id: UserId) -> list[Conversation]:
        return self._filter(lambda conversation: conversation.has_member(user_id))
