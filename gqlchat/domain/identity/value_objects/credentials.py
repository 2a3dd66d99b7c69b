"""
Credential value objects for the account aggregate.

Passwords are kept and compared as plain values and tokens are the
password re-wrapped. This is a tutorial scheme with no hashing and no
expiry, and it offers no protection for real credentials.
"""

from dataclasses import dataclass

from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_object import ValueObject


def _require_non_empty(kind: str, value: object) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(
            f"{kind} must be a non-empty string", rule="non_empty", field=kind, value=None
        )


@dataclass(frozen=True)
class Password(ValueObject):
    """Opaque password, compared by value."""

    value: str

    def _validate(self) -> None:
        _require_non_empty(self.kind, self.value)

    def __repr__(self) -> str:
        return "Password(value='***')"


@dataclass(frozen=True)
class Token(ValueObject):
    """Opaque session token handed back after a successful login."""

    value: str

    def _validate(self) -> None:
        _require_non_empty(self.kind, self.value)

    @classmethod
    def from_password(cls, password: Password) -> "Token":
        """Derive the token for a password. Deterministic: same password, same token."""
        return Token(password.value)
