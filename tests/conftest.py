"""Pytest configuration and fixtures."""

import pytest

from gqlchat.config import Settings
from gqlchat.core import Container, bootstrap
from gqlchat.domain.identity.entities.user import User


@pytest.fixture
def container() -> Container:
    """A fresh container (empty stores) for each test."""
    return bootstrap(Settings(ENVIRONMENT="test", SEED_DEMO_DATA=False))


@pytest.fixture
def ann(container: Container) -> User:
    """A registered account: a@b.com / pw / Ann."""
    return container.register_user_use_case().register("a@b.com", "pw", "Ann")


@pytest.fixture
def bob(container: Container) -> User:
    return container.register_user_use_case().register("bob@example.org", "secret", "Bob")
