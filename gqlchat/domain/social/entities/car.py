"""Car aggregate."""

from dataclasses import dataclass

from gqlchat.domain.common.aggregate_root import AggregateRoot
from gqlchat.domain.common.entity import new_id
from gqlchat.domain.common.value_objects.ids import CarId, PersonId
from gqlchat.domain.social.value_objects import CarModel


@dataclass(eq=False)
class Car(AggregateRoot[CarId]):
    """A car owned by one person, referenced by identifier."""

    id: CarId
    model: CarModel
    owner_id: PersonId

    def is_owned_by(self, person_id: PersonId) -> bool:
        return self.owner_id == person_id

    @classmethod
    def create(cls, model: CarModel, owner_id: PersonId) -> "Car":
        return cls(id=new_id(CarId), model=model, owner_id=owner_id)
