"""Use case for people and their best friends."""

import structlog

from gqlchat.application.social.protocols.person_store import PersonStoreProtocol
from gqlchat.domain.common.exceptions import ReferentialIntegrityError
from gqlchat.domain.common.value_object import deserialize
from gqlchat.domain.common.value_objects.display_name import DisplayName
from gqlchat.domain.common.value_objects.ids import PersonId
from gqlchat.domain.social.entities.person import Person
from gqlchat.domain.social.exceptions import PersonNotFoundError

logger = structlog.get_logger(__name__)


class PeopleUseCase:
    """Use case for people and their best friends."""

    def __init__(self, person_store: PersonStoreProtocol) -> None:
        """Initialize use case with dependencies."""
        self.person_store = person_store

    def create_person(self, name: str) -> Person:
        """
        Create a person without a best friend.

        Raises:
            ValidationError: If the name is blank or too long
        """
        person = self.person_store.save(Person.create(deserialize(DisplayName, name)))
        logger.info("person_created", person_id=person.identity)
        return person

    def get_person(self, person_id: str) -> Person:
        """
        Raises:
            PersonNotFoundError: If the person does not exist
        """
        person = self.person_store.load(deserialize(PersonId, person_id))
        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    def list_people(self) -> list[Person]:
        return self.person_store.all()

    def find_by_name(self, name: str) -> list[Person]:
        return self.person_store.find_by_name(deserialize(DisplayName, name))

    def befriend(self, person_id: str, friend_id: str, *, mutual: bool = False) -> Person:
        """
        Make ``friend_id`` the best friend of ``person_id``.

        Args:
            person_id: Person whose best friend changes
            friend_id: The new best friend
            mutual: Also make ``person_id`` the best friend of ``friend_id``

        Returns:
            The updated person

        Raises:
            PersonNotFoundError: If either person does not exist
        """
        person = self.get_person(person_id)
        friend = self.get_person(friend_id)

        person.befriend(friend.id)
        self.person_store.save(person)
        if mutual:
            friend.befriend(person.id)
            self.person_store.save(friend)

        logger.info("best_friend_set", person_id=person_id, friend_id=friend_id, mutual=mutual)

        return person

    def get_best_friend(self, person_id: str) -> Person | None:
        """
        Follow the best friend relation of a person.

        Returns:
            The best friend, or None when the person has not named one

        Raises:
            PersonNotFoundError: If the person does not exist
            ReferentialIntegrityError: If the stored best friend id dangles
        """
        person = self.get_person(person_id)
        if person.best_friend_id is None:
            return None

        best_friend = self.person_store.load(person.best_friend_id)
        if best_friend is None:
            logger.warning(
                "dangling_best_friend",
                person_id=person_id,
                best_friend_id=person.best_friend_id.value,
            )
            raise ReferentialIntegrityError("Person", "best_friend_id", person.best_friend_id.value)
        return best_friend
