"""Tests for the ValueObject base and its free-function factories."""

import pytest

from gqlchat.domain.chat.value_objects import MAX_MESSAGE_LENGTH, MessageContent
from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_object import ValueObject, deserialize, serialize
from gqlchat.domain.common.value_objects import DisplayName, PersonId, UserId
from gqlchat.domain.common.value_objects.display_name import MAX_DISPLAY_NAME_LENGTH
from gqlchat.domain.identity.value_objects import Email, Password, Token
from gqlchat.domain.social.value_objects import CarModel


class TestValueObject:
    """Test suite for value object equality, immutability and serialization."""

    def test_equal_when_same_kind_and_value(self) -> None:
        assert DisplayName("Ann") == DisplayName("Ann")
        assert hash(DisplayName("Ann")) == hash(DisplayName("Ann"))

    def test_not_equal_when_values_differ(self) -> None:
        assert DisplayName("Ann") != DisplayName("Bob")

    def test_not_equal_across_kinds(self) -> None:
        assert UserId("abc") != PersonId("abc")

    def test_is_frozen(self) -> None:
        name = DisplayName("Ann")
        with pytest.raises(AttributeError):
            name.value = "Bob"  # type: ignore[misc]

    def test_serialize_returns_wrapped_primitive(self) -> None:
        assert serialize(DisplayName("Ann")) == "Ann"

    @pytest.mark.parametrize(
        "original",
        [
            UserId("u-1"),
            PersonId("p-1"),
            DisplayName("Ann"),
            Email("a@b.com"),
            Password("pw"),
            Token("pw"),
            MessageContent("x" * MAX_MESSAGE_LENGTH),
            MessageContent(""),
            CarModel("Renault Clio"),
        ],
        ids=repr,
    )
    def test_deserialize_roundtrip(self, original: ValueObject) -> None:
        restored = deserialize(type(original), serialize(original))
        assert restored == original
        assert type(restored) is type(original)

    def test_deserialize_runs_validation(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            deserialize(DisplayName, "   ")
        assert exc_info.value.rule == "not_blank"
        assert exc_info.value.field == "DisplayName"

    @pytest.mark.parametrize("raw", [None, ["Ann"], True, {"value": "Ann"}])
    def test_rejects_non_primitive(self, raw: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            deserialize(DisplayName, raw)
        assert exc_info.value.rule == "primitive"

    def test_str_is_the_primitive(self) -> None:
        assert str(DisplayName("Ann")) == "Ann"


class TestDisplayName:
    def test_max_length_boundary(self) -> None:
        assert DisplayName("x" * MAX_DISPLAY_NAME_LENGTH).value == "x" * MAX_DISPLAY_NAME_LENGTH

    def test_too_long(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            DisplayName("x" * (MAX_DISPLAY_NAME_LENGTH + 1))

    def test_keeps_value_as_given(self) -> None:
        assert DisplayName(" Ann ").value == " Ann "
