"""CarModel value object."""

from dataclasses import dataclass

from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_object import ValueObject

MAX_CAR_MODEL_LENGTH = 100


@dataclass(frozen=True)
class CarModel(ValueObject):
    """Make and model of a car, e.g. "Renault Clio"."""

    value: str

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(
                "Car model cannot be blank", rule="not_blank", field=self.kind, value=self.value
            )
        if len(self.value) > MAX_CAR_MODEL_LENGTH:
            raise ValidationError(
                f"Car model cannot exceed {MAX_CAR_MODEL_LENGTH} characters",
                rule="max_length",
                field=self.kind,
                value=self.value,
            )
