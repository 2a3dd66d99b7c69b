"""Tests for the in-memory event bus."""

from dataclasses import dataclass

import pytest

from gqlchat.domain.chat.events import MemberAdded, MessagePublished
from gqlchat.domain.common.domain_event import DomainEvent
from gqlchat.domain.common.value_objects import ConversationId, MessageId, UserId
from gqlchat.infrastructure.common.event_bus import InMemoryEventBus


def published(conversation: str = "c-1", content: str = "hi") -> MessagePublished:
    return MessagePublished(
        conversation_id=ConversationId(conversation),
        message_id=MessageId("m-1"),
        author_id=UserId("u-1"),
        content=content,
    )


class TestInMemoryEventBus:
    def test_delivers_to_subscribers_of_the_type(self) -> None:
        bus = InMemoryEventBus()
        received: list[DomainEvent] = []
        bus.subscribe(MessagePublished, received.append)

        event = published()
        bus.publish(event)
        bus.publish(MemberAdded(conversation_id=ConversationId("c-1"), user_id=UserId("u-2")))

        assert received == [event]

    def test_predicate_filters_events(self) -> None:
        bus = InMemoryEventBus()
        received: list[DomainEvent] = []
        bus.subscribe(
            MessagePublished,
            received.append,
            lambda e: isinstance(e, MessagePublished) and e.conversation_id.value == "c-1",
        )

        bus.publish_many([published("c-1", "a"), published("c-2", "b"), published("c-1", "c")])

        assert [e.content for e in received] == ["a", "c"]  # type: ignore[attr-defined]

    def test_handlers_run_in_subscription_order(self) -> None:
        bus = InMemoryEventBus()
        calls: list[str] = []
        bus.subscribe(MessagePublished, lambda _: calls.append("first"))
        bus.subscribe(MessagePublished, lambda _: calls.append("second"))

        bus.publish(published())

        assert calls == ["first", "second"]

    def test_unsubscribe(self) -> None:
        bus = InMemoryEventBus()
        received: list[DomainEvent] = []
        unsubscribe = bus.subscribe(MessagePublished, received.append)

        unsubscribe()
        unsubscribe()
        bus.publish(published())

        assert received == []

    def test_handler_error_propagates(self) -> None:
        @dataclass(frozen=True)
        class Boom(DomainEvent):
            pass

        def explode(_: DomainEvent) -> None:
            raise RuntimeError("handler failed")

        bus = InMemoryEventBus()
        bus.subscribe(Boom, explode)

        with pytest.raises(RuntimeError, match="handler failed"):
            bus.publish(Boom())

    def test_publish_without_subscribers(self) -> None:
        InMemoryEventBus().publish(published())
