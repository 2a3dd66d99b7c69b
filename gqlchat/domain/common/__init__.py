"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable wrappers around one primitive
- Entity: Objects with identity and lifecycle
- AggregateRoot: Units of load/save that record domain events
- DomainEvent: Notifications of significant domain occurrences
"""

from .aggregate_root import AggregateRoot
from .domain_event import DomainEvent
from .entity import Entity, EntityId, Identifiable, new_id
from .exceptions import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
    ReferentialIntegrityError,
    ValidationError,
)
from .value_object import ValueObject, deserialize, serialize

__all__ = [
    "AggregateRoot",
    "AuthenticationError",
    "BusinessRuleViolationError",
    "DomainError",
    "DomainEvent",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "Identifiable",
    "InvariantViolationError",
    "ReferentialIntegrityError",
    "ValidationError",
    "ValueObject",
    "deserialize",
    "new_id",
    "serialize",
]
