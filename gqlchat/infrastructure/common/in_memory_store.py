"""Generic in-memory store keyed by aggregate identity."""

import copy
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from gqlchat.domain.common.entity import EntityId, Identifiable

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Identifiable)


class InMemoryStore(Generic[T]):
    """
    Keyed container for one aggregate kind, living as long as the process.

    The store keeps its own copy of every saved instance and hands out
    copies on reads, so changes only become visible through an explicit
    save. Not safe for concurrent writers.
    """

    def __init__(self) -> None:
        self._items: dict[str, T] = {}

    def save(self, instance: T) -> T:
        """
        Insert or replace the instance stored under its identity.

        Last write wins.

        Returns:
            The instance that was passed in
        """
        identity = instance.identity
        replaced = identity in self._items
        self._items[identity] = copy.deepcopy(instance)
        logger.debug(
            f"{'Replaced' if replaced else 'Stored'} {type(instance).__name__} {identity}"
        )
        return instance

    def load(self, identity: str | EntityId) -> T | None:
        """
        Find an instance by identity.

        Returns:
            A copy of the stored instance, or None if nothing is stored under it
        """
        key = identity.value if isinstance(identity, EntityId) else identity
        item = self._items.get(key)
        return copy.deepcopy(item) if item is not None else None

    def all(self) -> list[T]:
        """Return copies of every stored instance, in no guaranteed order."""
        return [copy.deepcopy(item) for item in self._items.values()]

    def _filter(self, predicate: Callable[[T], bool]) -> list[T]:
        # Linear scan, fine at demo scale; a real store would index the field.
        return [item for item in self.all() if predicate(item)]

    def _first(self, predicate: Callable[[T], bool]) -> T | None:
        return next((item for item in self.all() if predicate(item)), None)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, identity: object) -> bool:
        key = identity.value if isinstance(identity, EntityId) else identity
        return key in self._items
