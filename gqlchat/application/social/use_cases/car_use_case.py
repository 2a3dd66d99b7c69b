"""Use case for cars and their owners."""

import structlog

from gqlchat.application.social.protocols.car_store import CarStoreProtocol
from gqlchat.application.social.protocols.person_store import PersonStoreProtocol
from gqlchat.domain.common.exceptions import ReferentialIntegrityError
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.common.value_objects.ids import CarId, PersonId
from gqlchat.domain.social.entities.car import Car
from gqlchat.domain.social.entities.person import Person
from gqlchat.domain.social.exceptions import CarNotFoundError, PersonNotFoundError
from gqlchat.domain.social.value_objects import CarModel

logger = structlog.get_logger(__name__)


class CarUseCase:
    """Use case for cars and their owners."""

    def __init__(self, car_store: CarStoreProtocol, person_store: PersonStoreProtocol) -> None:
        """Initialize use case with dependencies."""
        self.car_store = car_store
        self.person_store = person_store

    def register_car(self, model: str, owner_id: str) -> Car:
        """
        Register a car for an existing person.

        Raises:
            ValidationError: If the model or owner id is malformed
            PersonNotFoundError: If the owner is unknown
        """
        car_model = deserialize(CarModel, model)
        owner = deserialize(PersonId, owner_id)
        if self.person_store.load(owner) is None:
            raise PersonNotFoundError(owner_id)

        car = self.car_store.save(Car.create(car_model, owner))
        logger.info("car_registered", car_id=car.identity, owner_id=owner_id)
        return car

    def get_car(self, car_id: str) -> Car:
        """
        Raises:
            CarNotFoundError: If the car does not exist
        """
        car = self.car_store.load(deserialize(CarId, car_id))
        if car is None:
            raise CarNotFoundError(car_id)
        return car

    def list_cars(self) -> list[Car]:
        return self.car_store.all()

    def cars_of(self, person_id: str) -> list[Car]:
        """Cars owned by a person, in no particular order."""
        return self.car_store.find_by_owner(deserialize(PersonId, person_id))

    def get_owner(self, car_id: str) -> Person:
        """
        Follow the owner relation of a car.

        Raises:
            CarNotFoundError: If the car does not exist
            ReferentialIntegrityError: If the stored owner id dangles
        """
        car = self.get_car(car_id)
        owner = self.person_store.load(car.owner_id)
        if owner is None:
            logger.warning("dangling_car_owner", car_id=car_id, owner_id=car.owner_id.value)
            raise ReferentialIntegrityError("Car", "owner_id", car.owner_id.value)
        return owner
