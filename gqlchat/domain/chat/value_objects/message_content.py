"""MessageContent value object."""

from dataclasses import dataclass

from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_object import ValueObject

# Domain constraints
MAX_MESSAGE_LENGTH = 100


@dataclass(frozen=True)
class MessageContent(ValueObject):
    """Text of a chat message, at most MAX_MESSAGE_LENGTH characters."""

    value: str

    def _validate(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                "Message content must be a string", rule="string", field=self.kind, value=self.value
            )
        if len(self.value) > MAX_MESSAGE_LENGTH:
            raise ValidationError(
                f"Message content cannot exceed {MAX_MESSAGE_LENGTH} characters",
                rule="max_length",
                field=self.kind,
                value=len(self.value),
            )
