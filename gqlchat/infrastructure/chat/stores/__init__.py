from .conversation_store import InMemoryConversationStore

__all__ = ["InMemoryConversationStore"]
