"""In-memory event bus implementation."""

from collections.abc import Callable

import structlog

from gqlchat.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]
EventPredicate = Callable[[DomainEvent], bool]


class InMemoryEventBus:
    """
    Simple synchronous in-memory event bus.

    Handlers run inside the publishing call, in subscription order.
    An exception raised by a handler propagates to the publisher.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[tuple[EventHandler, EventPredicate | None]]] = {}

    def publish(self, event: DomainEvent) -> None:
        """Publish a single domain event."""
        subscriptions = list(self._handlers.get(type(event), []))
        delivered = 0
        for handler, predicate in subscriptions:
            if predicate is not None and not predicate(event):
                continue
            handler(event)
            delivered += 1
        logger.debug("event_published", event_type=event.event_type, delivered=delivered)

    def publish_many(self, events: list[DomainEvent]) -> None:
        """Publish multiple domain events."""
        for event in events:
            self.publish(event)

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
        predicate: EventPredicate | None = None,
    ) -> Callable[[], None]:
        """
        Subscribe a handler to an event type.

        Args:
            event_type: Exact event class to listen for
            handler: Called with each matching event
            predicate: Optional filter; the handler only sees events it accepts

        Returns:
            Callable that removes this subscription (safe to call twice)
        """
        subscription = (handler, predicate)
        self._handlers.setdefault(event_type, []).append(subscription)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event_type, [])
            if subscription in handlers:
                handlers.remove(subscription)

        return unsubscribe
