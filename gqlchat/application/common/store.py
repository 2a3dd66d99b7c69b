"""
Store port.

A store is a keyed container of one aggregate kind. Any class offering
``save``/``load``/``all`` by identity qualifies; no base class is needed.

Example:
    class ConversationStoreProtocol(StoreProtocol[Conversation], Protocol):
        def find_by_member(self, user_id: UserId) -> list[Conversation]: ...
"""

from typing import Protocol, TypeVar

from gqlchat.domain.common.entity import EntityId, Identifiable

T = TypeVar("T", bound=Identifiable)


class StoreProtocol(Protocol[T]):
    def save(self, instance: T) -> T: ...

    def load(self, identity: str | EntityId) -> T | None: ...

    def all(self) -> list[T]: ...
