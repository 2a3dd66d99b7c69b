from collections.abc import Callable
from typing import Protocol

from gqlchat.domain.common.domain_event import DomainEvent

EventHandler = Callable[[DomainEvent], None]
EventPredicate = Callable[[DomainEvent], bool]


class EventSubscriberProtocol(Protocol):
    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
        predicate: EventPredicate | None = None,
    ) -> Callable[[], None]: ...
