from typing import Protocol

from gqlchat.application.common.store import StoreProtocol
from gqlchat.domain.chat.entities.conversation import Conversation
from gqlchat.domain.common.value_objects.ids import UserId


class ConversationStoreProtocol(StoreProtocol[Conversation], Protocol):
    def find_by_member(self, user_id: UserId) -> list[Conversation]: ...
