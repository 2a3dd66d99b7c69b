"""Identity domain exceptions."""

from gqlchat.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: object) -> None:
        super().__init__("User", user_id)


class EmailAlreadyRegisteredError(BusinessRuleViolationError):
    """Raised when attempting to register with an email that already exists."""

    def __init__(self, email: str) -> None:
        super().__init__("unique_email", f"Email {email} is already registered")
        self.email = email


class PasswordAlreadyInUseError(BusinessRuleViolationError):
    """Raised when a new account's password would yield another account's token."""

    def __init__(self) -> None:
        super().__init__("unique_token", "Password is already in use by another account")
