"""Lookups shared by the chat use cases."""

from gqlchat.application.chat.protocols.conversation_store import ConversationStoreProtocol
from gqlchat.application.identity.protocols.user_store import UserStoreProtocol
from gqlchat.domain.chat.entities.conversation import Conversation
from gqlchat.domain.chat.exceptions import ConversationNotFoundError
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.common.value_objects.ids import ConversationId, UserId
from gqlchat.domain.identity.exceptions import UserNotFoundError


def load_conversation(store: ConversationStoreProtocol, conversation_id: str) -> Conversation:
    conversation = store.load(deserialize(ConversationId, conversation_id))
    if conversation is None:
        raise ConversationNotFoundError(conversation_id)
    return conversation


def existing_user_id(store: UserStoreProtocol, user_id: str) -> UserId:
    """Deserialize ``user_id`` and check that the account exists."""
    typed_id = deserialize(UserId, user_id)
    if store.load(typed_id) is None:
        raise UserNotFoundError(user_id)
    return typed_id
