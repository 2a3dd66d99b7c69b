"""DisplayName value object for human-facing names."""

from dataclasses import dataclass

from ..exceptions import ValidationError
from ..value_object import ValueObject

MAX_DISPLAY_NAME_LENGTH = 100


@dataclass(frozen=True)
class DisplayName(ValueObject):
    """
    Name shown for an account or a person.

    Must contain at least one non-whitespace character and be at most
    MAX_DISPLAY_NAME_LENGTH characters long. Stored exactly as given.
    """

    value: str

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                "Display name cannot be blank", rule="not_blank", field=self.kind, value=self.value
            )
        if len(self.value) > MAX_DISPLAY_NAME_LENGTH:
            raise ValidationError(
                f"Display name cannot exceed {MAX_DISPLAY_NAME_LENGTH} characters",
                rule="max_length",
                field=self.kind,
                value=self.value,
            )
