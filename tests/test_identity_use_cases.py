"""Tests for registration, login and the current user query."""

import pytest

from gqlchat.core import Container
from gqlchat.domain.common.exceptions import AuthenticationError, ValidationError
from gqlchat.domain.identity.entities.user import User
from gqlchat.domain.identity.exceptions import (
    EmailAlreadyRegisteredError,
    PasswordAlreadyInUseError,
    UserNotFoundError,
)
from gqlchat.domain.identity.value_objects import Token


def test_register_saves_user(container: Container, ann: User) -> None:
    stored = container.user_store().load(ann.id)
    assert stored is not None
    assert stored.email.value == "a@b.com"
    assert stored.name.value == "Ann"


def test_register_rejects_invalid_email(container: Container) -> None:
    with pytest.raises(ValidationError) as exc_info:
        container.register_user_use_case().register("not-an-email", "pw", "Ann")
    assert exc_info.value.rule == "email_format"
    assert len(container.user_store()) == 0


def test_register_rejects_duplicate_email(container: Container, ann: User) -> None:
    with pytest.raises(EmailAlreadyRegisteredError):
        container.register_user_use_case().register("a@b.com", "other", "Ann Again")
    assert len(container.user_store()) == 1


def test_register_rejects_password_of_another_account(container: Container, ann: User) -> None:
    with pytest.raises(PasswordAlreadyInUseError) as exc_info:
        container.register_user_use_case().register("carl@b.com", "pw", "Carl")
    assert exc_info.value.rule == "unique_token"
    assert len(container.user_store()) == 1

    me = container.get_current_user_use_case().get_current_user("pw")

    assert me is not None
    assert me.id == ann.id


def test_authenticate_with_right_password(container: Container, ann: User) -> None:
    user, token = container.authenticate_user_use_case().authenticate("a@b.com", "pw")
    assert user.id == ann.id
    assert token == Token("pw")


def test_authenticate_with_wrong_password(container: Container, ann: User) -> None:
    with pytest.raises(AuthenticationError):
        container.authenticate_user_use_case().authenticate("a@b.com", "wrong")


def test_authenticate_unknown_email(container: Container, ann: User) -> None:
    with pytest.raises(AuthenticationError):
        container.authenticate_user_use_case().authenticate("nobody@b.com", "pw")


def test_current_user_from_login_token(container: Container, ann: User, bob: User) -> None:
    _, token = container.authenticate_user_use_case().authenticate("a@b.com", "pw")

    me = container.get_current_user_use_case().get_current_user(token.value)

    assert me is not None
    assert me.id == ann.id


@pytest.mark.parametrize("token", [None, "", "unknown"])
def test_current_user_is_none_for_anonymous(
    container: Container, ann: User, token: str | None
) -> None:
    assert container.get_current_user_use_case().get_current_user(token) is None


def test_get_user(container: Container, ann: User) -> None:
    assert container.get_user_use_case().get_user(ann.identity).id == ann.id


def test_get_unknown_user(container: Container) -> None:
    with pytest.raises(UserNotFoundError):
        container.get_user_use_case().get_user("missing")


def test_list_users(container: Container, ann: User, bob: User) -> None:
    users = container.get_user_use_case().list_users()
    assert {u.identity for u in users} == {ann.identity, bob.identity}
