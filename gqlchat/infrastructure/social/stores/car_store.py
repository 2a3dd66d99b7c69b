"""In-memory store for Car aggregates."""

from gqlchat.domain.common.value_objects.ids import PersonId
from gqlchat.domain.social.entities.car import Car
from gqlchat.infrastructure.common.in_memory_store import InMemoryStore


class InMemoryCarStore(InMemoryStore[Car]):
    """In-memory store for Car aggregates."""

    def find_by_owner(self, person_id: PersonId) -> list[Car]:
        return self._filter(lambda car: car.is_owned_by(person_id))
