from .conversation_store import ConversationStoreProtocol
from .event_subscriber import EventHandler, EventPredicate, EventSubscriberProtocol

__all__ = [
    "ConversationStoreProtocol",
    "EventHandler",
    "EventPredicate",
    "EventSubscriberProtocol",
]
