from .add_member_use_case import AddMemberUseCase
from .conversation_query_use_case import ConversationQueryUseCase
from .publish_message_use_case import PublishMessageUseCase
from .start_conversation_use_case import StartConversationUseCase
from .subscribe_to_conversation_use_case import SubscribeToConversationUseCase

__all__ = [
    "AddMemberUseCase",
    "ConversationQueryUseCase",
    "PublishMessageUseCase",
    "StartConversationUseCase",
    "SubscribeToConversationUseCase",
]
