"""Identity value objects."""

from .credentials import Password, Token
from .email import Email

__all__ = ["Email", "Password", "Token"]
