"""Person aggregate."""

from dataclasses import dataclass

from gqlchat.domain.common.aggregate_root import AggregateRoot
from gqlchat.domain.common.entity import new_id
from gqlchat.domain.common.value_objects.display_name import DisplayName
from gqlchat.domain.common.value_objects.ids import PersonId


@dataclass(eq=False)
class Person(AggregateRoot[PersonId]):
    """
    A person who may name one best friend.

    Business Rules:
    - The best friend relation points one way; nothing forces it to be mutual
    - The best friend is referenced by identifier, so it may dangle
    """

    id: PersonId
    name: DisplayName
    best_friend_id: PersonId | None = None

    def befriend(self, other_id: PersonId) -> None:
        """Make ``other_id`` this person's best friend, replacing any previous one."""
        self.best_friend_id = other_id

    @classmethod
    def create(cls, name: DisplayName) -> "Person":
        """Create a person without a best friend."""
        return cls(id=new_id(PersonId), name=name)
