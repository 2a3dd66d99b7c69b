from typing import Protocol

from gqlchat.application.common.store import StoreProtocol
from gqlchat.domain.common.value_objects.ids import PersonId
from gqlchat.domain.social.entities.car import Car


class CarStoreProtocol(StoreProtocol[Car], Protocol):
    def find_by_owner(self, person_id: PersonId) -> list[Car]: ...
