"""In-memory store for Person aggregates."""

from gqlchat.domain.common.value_objects.display_name import DisplayName
from gqlchat.domain.social.entities.person import Person
from gqlchat.infrastructure.common.in_memory_store import InMemoryStore


class InMemoryPersonStore(InMemoryStore[Person]):
    """In-memory store for Person aggregates."""

    def find_by_name(self, name: DisplayName) -> list[Person]:
        return self._filter(lambda person: person.name == name)
