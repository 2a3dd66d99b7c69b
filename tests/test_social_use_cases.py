"""Tests for people, best friends and cars."""

import pytest

from gqlchat.core import Container
from gqlchat.domain.common.exceptions import ReferentialIntegrityError, ValidationError
from gqlchat.domain.common.value_objects import PersonId
from gqlchat.domain.social.entities import Car, Person
from gqlchat.domain.social.exceptions import CarNotFoundError, PersonNotFoundError
from gqlchat.domain.social.value_objects import CarModel


@pytest.fixture
def alice(container: Container) -> Person:
    return container.people_use_case().create_person("alice")


@pytest.fixture
def bob(container: Container) -> Person:
    return container.people_use_case().create_person("bob")


def test_create_person_rejects_blank_name(container: Container) -> None:
    with pytest.raises(ValidationError):
        container.people_use_case().create_person("  ")


def test_get_unknown_person(container: Container) -> None:
    with pytest.raises(PersonNotFoundError):
        container.people_use_case().get_person("missing")


def test_befriend_one_way(container: Container, alice: Person, bob: Person) -> None:
    people = container.people_use_case()
    people.befriend(alice.identity, bob.identity)

    best_friend = people.get_best_friend(alice.identity)
    assert best_friend is not None
    assert best_friend.id == bob.id
    assert people.get_best_friend(bob.identity) is None


def test_befriend_mutual(container: Container, alice: Person, bob: Person) -> None:
    people = container.people_use_case()
    people.befriend(alice.identity, bob.identity, mutual=True)

    assert people.get_person(bob.identity).best_friend_id == alice.id
    assert people.get_person(alice.identity).best_friend_id == bob.id


def test_befriend_unknown_friend(container: Container, alice: Person) -> None:
    with pytest.raises(PersonNotFoundError):
        container.people_use_case().befriend(alice.identity, "ghost")


def test_dangling_best_friend(container: Container, alice: Person) -> None:
    alice.befriend(PersonId("ghost"))
    container.person_store().save(alice)

    with pytest.raises(ReferentialIntegrityError) as exc_info:
        container.people_use_case().get_best_friend(alice.identity)
    assert exc_info.value.target_id == "ghost"


def test_find_by_name(container: Container, alice: Person, bob: Person) -> None:
    found = container.people_use_case().find_by_name("alice")
    assert [p.id for p in found] == [alice.id]


def test_list_people(container: Container, alice: Person, bob: Person) -> None:
    assert len(container.people_use_case().list_people()) == 2


def test_register_car_and_get_owner(container: Container, alice: Person) -> None:
    cars = container.car_use_case()
    car = cars.register_car("Renault Clio", alice.identity)

    assert cars.get_owner(car.identity).id == alice.id
    assert [c.id for c in cars.cars_of(alice.identity)] == [car.id]
    assert [c.id for c in cars.list_cars()] == [car.id]


def test_register_car_for_unknown_owner(container: Container) -> None:
    with pytest.raises(PersonNotFoundError):
        container.car_use_case().register_car("Renault Clio", "ghost")
    assert container.car_use_case().list_cars() == []


def test_get_unknown_car(container: Container) -> None:
    with pytest.raises(CarNotFoundError):
        container.car_use_case().get_car("missing")


def test_dangling_owner(container: Container) -> None:
    car = container.car_store().save(Car.create(CarModel("Renault Clio"), PersonId("ghost")))

    with pytest.raises(ReferentialIntegrityError):
        container.car_use_case().get_owner(car.identity)
