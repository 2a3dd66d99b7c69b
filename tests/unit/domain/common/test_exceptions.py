from gqlchat.domain.common.exceptions import (
    DomainError,
    EntityNotFoundError,
    ReferentialIntegrityError,
    ValidationError,
)


def test_validation_error_names_the_rule() -> None:
    error = ValidationError("too long", rule="max_length", field="MessageContent", value=101)
    assert error.details == {"rule": "max_length", "field": "MessageContent", "value": 101}
    assert "max_length" in str(error)
    assert isinstance(error, DomainError)


def test_entity_not_found_message() -> None:
    error = EntityNotFoundError("User", "abc")
    assert error.message == "User with id abc not found"


def test_referential_integrity_error_details() -> None:
    error = ReferentialIntegrityError("Person", "best_friend_id", "p-9")
    assert error.details == {"source": "Person", "relation": "best_friend_id", "target_id": "p-9"}
    assert "p-9" in error.message
