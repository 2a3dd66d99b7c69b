from .conversation import Conversation
from .message import Message

__all__ = ["Conversation", "Message"]
