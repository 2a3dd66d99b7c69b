"""Email value object."""

import re
from dataclasses import dataclass

from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_object import ValueObject

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class Email(ValueObject):
    """
    Email address of an account.

    Requires a local part, an ``@`` and a domain containing a dot
    (``local@domain.tld``). No normalization is applied.
    """

    value: str

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not _EMAIL_PATTERN.fullmatch(self.value):
            raise ValidationError(
                f"Invalid email format: {self.value!r}",
                rule="email_format",
                field=self.kind,
                value=self.value,
            )
