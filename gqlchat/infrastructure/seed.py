"""Demo data loaded at startup so the API has something to show."""

from dataclasses import dataclass

import structlog

from gqlchat.application.social.use_cases.car_use_case import CarUseCase
from gqlchat.application.social.use_cases.people_use_case import PeopleUseCase
from gqlchat.domain.social.entities.car import Car
from gqlchat.domain.social.entities.person import Person

logger = structlog.get_logger(__name__)


@dataclass
class DemoData:
    """The aggregates created by seed_demo_data."""

    people: list[Person]
    cars: list[Car]


def seed_demo_data(people: PeopleUseCase, cars: CarUseCase) -> DemoData:
    """
    Create two people who are each other's best friend, and a car for each.

    Runs through the use cases, so the same validation applies as for
    resolver input.
    """
    alice = people.create_person("alice")
    bob = people.create_person("bob")
    people.befriend(alice.identity, bob.identity, mutual=True)

    seeded_cars = [
        cars.register_car("Renault Clio", alice.identity),
        cars.register_car("Peugeot 205", bob.identity),
    ]

    logger.info("demo_data_seeded", people=2, cars=len(seeded_cars))

    return DemoData(
        people=[people.get_person(alice.identity), people.get_person(bob.identity)],
        cars=seeded_cars,
    )
