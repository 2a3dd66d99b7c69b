"""Social domain layer: people, best friends and cars."""

from gqlchat.domain.social.entities import Car, Person
from gqlchat.domain.social.exceptions import CarNotFoundError, PersonNotFoundError
from gqlchat.domain.social.value_objects import CarModel

__all__ = [
    "Car",
    "CarModel",
    "CarNotFoundError",
    "Person",
    "PersonNotFoundError",
]
