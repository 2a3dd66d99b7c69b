from typing import Protocol

from gqlchat.application.common.store import StoreProtocol
from gqlchat.domain.common.value_objects.display_name import DisplayName
from gqlchat.domain.social.entities.person import Person


class PersonStoreProtocol(StoreProtocol[Person], Protocol):
    def find_by_name(self, name: DisplayName) -> list[Person]: ...
