"""
Base class for Value Objects.

Value Objects are immutable wrappers around a single primitive. Two value
objects are equal if they are of the same kind and wrap equal primitives.

Example:
    @dataclass(frozen=True)
    class Email(ValueObject):
        value: str

        def _validate(self) -> None:
            if "@" not in self.value:
                raise ValidationError("Invalid email format", rule="email_format")
"""

from dataclasses import dataclass
from typing import TypeVar

from .exceptions import ValidationError

Primitive = str | int | float

VO = TypeVar("VO", bound="ValueObject")


@dataclass(frozen=True)
class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (frozen dataclass)
    - Compared by value (same kind, same primitive)
    - Self-validating (_validate runs at construction)

    Subclasses should be decorated with @dataclass(frozen=True),
    narrow the type of ``value`` and override ``_validate``.
    """

    value: Primitive

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, str | int | float):
            raise ValidationError(
                f"{self.kind} must wrap a string or a number",
                rule="primitive",
                field=self.kind,
                value=self.value,
            )
        self._validate()

    def _validate(self) -> None:
        """Check the construction invariant. Raise ValidationError on failure."""

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    def to_primitive(self) -> Primitive:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def serialize(value_object: ValueObject) -> Primitive:
    """Return the primitive wrapped by a value object."""
    return value_object.to_primitive()


def deserialize(kind: type[VO], raw: object) -> VO:
    """
    Rebuild a value object of the given kind from a primitive.

    Validation runs again, so untrusted input (resolver arguments)
    goes through here.

    Raises:
        ValidationError: If ``raw`` violates the kind's rules
    """
    return kind(raw)  # type: ignore[arg-type]
