"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass(eq=False)
    class Message(Entity[MessageId]):
        id: MessageId
        author_id: UserId
        content: MessageContent
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar
from uuid import uuid4

from .exceptions import InvariantViolationError, ValidationError
from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap an opaque string.
    They provide type safety to prevent mixing up IDs of different entities.

    Example:
        @dataclass(frozen=True)
        class UserId(EntityId):
            pass

        user_id = new_id(UserId)
        # UserId("abc") != PersonId("abc"), the kinds differ
    """

    value: str

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValidationError(
                f"{self.kind} must be a non-empty string",
                rule="non_empty_identifier",
                field=self.kind,
                value=self.value,
            )


IdType = TypeVar("IdType", bound=EntityId)


def new_id(kind: type[IdType]) -> IdType:
    """Generate a fresh random identifier of the given kind."""
    return kind(uuid4().hex)


class Identifiable(Protocol):
    """Anything exposing a stable string identity can be stored."""

    @property
    def identity(self) -> str: ...


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Bound to one identity for their whole life

    Subclasses must have an 'id' attribute of type IdType and should be
    declared with @dataclass(eq=False) so identity equality is kept.
    """

    id: IdType

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            raise InvariantViolationError(self.__class__.__name__, "identity cannot change")
        super().__setattr__(name, value)

    @property
    def identity(self) -> str:
        """The identifier as a plain string (the storage key)."""
        return self.id.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
