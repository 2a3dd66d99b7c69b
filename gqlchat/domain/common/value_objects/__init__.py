"""Common value objects shared across all domain modules."""

from .display_name import DisplayName
from .ids import CarId, ConversationId, MessageId, PersonId, UserId

__all__ = [
    # IDs
    "CarId",
    "ConversationId",
    "MessageId",
    "PersonId",
    "UserId",
    # Names
    "DisplayName",
]
