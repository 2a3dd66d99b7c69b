from .message_content import MAX_MESSAGE_LENGTH, MessageContent

__all__ = ["MAX_MESSAGE_LENGTH", "MessageContent"]
