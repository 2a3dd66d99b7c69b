"""Social domain exceptions."""

from gqlchat.domain.common.exceptions import EntityNotFoundError


class PersonNotFoundError(EntityNotFoundError):
    """Raised when a person (or a car owner) cannot be found."""

    def __init__(self, person_id: object) -> None:
        super().__init__("Person", person_id)


class CarNotFoundError(EntityNotFoundError):
    """Raised when a car cannot be found."""

    def __init__(self, car_id: object) -> None:
        super().__init__("Car", car_id)
