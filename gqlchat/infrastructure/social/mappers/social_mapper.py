"""Mappers for Person and Car domain → projection conversion."""

import string

from gqlchat.domain.social.entities.car import Car
from gqlchat.domain.social.entities.person import Person
from gqlchat.infrastructure.social.schemas import CarProjection, PersonProjection


class PersonMapper:
    """Mapper for Person domain → projection conversion."""

    def to_projection(self, person: Person) -> PersonProjection:
        # Names are shown capitalized whatever case they were stored in.
        return PersonProjection(
            id=person.identity,
            name=string.capwords(person.name.value),
            best_friend_id=person.best_friend_id.value if person.best_friend_id else None,
        )


class CarMapper:
    """Mapper for Car domain → projection conversion."""

    def to_projection(self, car: Car) -> CarProjection:
        return CarProjection(id=car.identity, model=car.model.value, owner_id=car.owner_id.value)
