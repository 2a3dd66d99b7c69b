"""Tests for Email, Password and Token value objects."""

import pytest

from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_object import deserialize, serialize
from gqlchat.domain.identity.value_objects import Email, Password, Token


class TestEmail:
    @pytest.mark.parametrize(
        "raw",
        ["a@b.com", "first.last@example.co.uk", "x+tag@mail.example.org"],
    )
    def test_accepts_valid_emails(self, raw: str) -> None:
        assert Email(raw).value == raw

    @pytest.mark.parametrize(
        "raw",
        ["", "ab.com", "a@bcom", "@b.com", "a@.", "a b@c.com", "a@b@c.com", "a@b.com\n"],
    )
    def test_rejects_invalid_emails(self, raw: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Email(raw)
        assert exc_info.value.rule == "email_format"

    def test_roundtrip(self) -> None:
        email = Email("a@b.com")
        assert deserialize(Email, serialize(email)) == email


class TestPassword:
    def test_compared_by_value(self) -> None:
        assert Password("pw") == Password("pw")
        assert Password("pw") != Password("PW")

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValidationError):
            Password("")

    def test_repr_hides_value(self) -> None:
        assert "pw" not in repr(Password("pw"))

    def test_validation_error_does_not_echo_value(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Password("")
        assert exc_info.value.value is None


class TestToken:
    def test_derived_from_password(self) -> None:
        assert Token.from_password(Password("pw")) == Token("pw")

    def test_derivation_is_deterministic(self) -> None:
        assert Token.from_password(Password("pw")) == Token.from_password(Password("pw"))

    def test_is_a_distinct_kind_from_password(self) -> None:
        assert Token("pw") != Password("pw")
