from .conversation_mapper import ConversationMapper

__all__ = ["ConversationMapper"]
