"""Tests for the Person and Car aggregates."""

import pytest

from gqlchat.domain.common.exceptions import ValidationError
from gqlchat.domain.common.value_objects import DisplayName, PersonId
from gqlchat.domain.social.entities import Car, Person
from gqlchat.domain.social.value_objects import CarModel


class TestPerson:
    def test_created_without_best_friend(self) -> None:
        person = Person.create(DisplayName("alice"))
        assert person.best_friend_id is None

    def test_befriend_is_one_directional(self) -> None:
        alice = Person.create(DisplayName("alice"))
        bob = Person.create(DisplayName("bob"))

        alice.befriend(bob.id)

        assert alice.best_friend_id == bob.id
        assert bob.best_friend_id is None

    def test_befriend_replaces_previous(self) -> None:
        alice = Person.create(DisplayName("alice"))
        alice.befriend(PersonId("p-1"))
        alice.befriend(PersonId("p-2"))
        assert alice.best_friend_id == PersonId("p-2")


class TestCar:
    def test_create(self) -> None:
        owner = PersonId("p-1")
        car = Car.create(CarModel("Renault Clio"), owner)
        assert car.is_owned_by(owner)
        assert not car.is_owned_by(PersonId("p-2"))

    @pytest.mark.parametrize("raw", ["", "   ", "x" * 101])
    def test_invalid_model(self, raw: str) -> None:
        with pytest.raises(ValidationError):
            CarModel(raw)
