"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They propagate unchanged to the resolver layer, which decides how
to render them.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when a value object rejects its primitive.

    Example: Malformed email, message content over the length limit.
    """

    def __init__(
        self,
        message: str,
        *,
        rule: str,
        field: str | None = None,
        value: object = None,
    ) -> None:
        details: dict[str, object] = {"rule": rule}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.rule = rule
        self.field = field
        self.value = value


class AuthenticationError(DomainError):
    """Raised when a credential comparison fails."""

    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """
    Raised when a lookup miss has to be reported to the caller.

    Stores return None on a miss; use cases convert that into this
    error when the operation cannot continue without the entity.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id


class ReferentialIntegrityError(DomainError):
    """
    Raised when a stored relation points at an aggregate that does not exist.

    Signals broken stored data rather than bad user input.

    Example: A person's best friend id no longer resolves to a person.
    """

    def __init__(self, source: str, relation: str, target_id: object) -> None:
        message = f"{source}.{relation} references missing aggregate {target_id}"
        super().__init__(
            message, {"source": source, "relation": relation, "target_id": target_id}
        )
        self.source = source
        self.relation = relation
        self.target_id = target_id


class BusinessRuleViolationError(DomainError):
    """
    Raised when a business rule is violated.

    Example: Registering a second account with an email already in use.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    Raised when an aggregate invariant is violated.

    Invariants are rules that must always be true for an aggregate
    to be in a valid state.

    Example: Reassigning the identity of a stored conversation.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        message = f"Invariant violation in {aggregate}: {invariant}"
        super().__init__(message, {"aggregate": aggregate, "invariant": invariant})
        self.aggregate = aggregate
        self.invariant = invariant
