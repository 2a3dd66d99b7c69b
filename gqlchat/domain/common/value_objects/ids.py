from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user account identifier."""


@dataclass(frozen=True)
class ConversationId(EntityId):
    """Strongly-typed conversation identifier."""


@dataclass(frozen=True)
class MessageId(EntityId):
    """Strongly-typed message identifier."""


@dataclass(frozen=True)
class PersonId(EntityId):
    """Strongly-typed person identifier."""


@dataclass(frozen=True)
class CarId(EntityId):
    """Strongly-typed car identifier."""
