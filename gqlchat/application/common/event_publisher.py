from typing import Protocol

from gqlchat.domain.common.domain_event import DomainEvent


class EventPublisherProtocol(Protocol):
    def publish(self, event: DomainEvent) -> None: ...

    def publish_many(self, events: list[DomainEvent]) -> None: ...
