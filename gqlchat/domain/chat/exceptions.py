"""Chat domain exceptions."""

from gqlchat.domain.common.exceptions import EntityNotFoundError


class ConversationNotFoundError(EntityNotFoundError):
    """Raised when a conversation cannot be found."""

    def __init__(self, conversation_id: object) -> None:
        super().__init__("Conversation", conversation_id)
