"""
Base class for Aggregate Roots.

Aggregate Roots are the entry point to an aggregate - a cluster of domain
objects that are treated as a single unit of load and save. All external
references go through the root's identifier, and all invariants are
enforced here.

Example:
    @dataclass(eq=False)
    class Conversation(AggregateRoot[ConversationId]):
        id: ConversationId
        members: list[UserId]

        def add_member(self, user_id: UserId) -> None:
            self.members.append(user_id)
            self._record_event(MemberAdded(conversation_id=self.id, user_id=user_id))
"""

from dataclasses import dataclass, field
from typing import Generic

from .domain_event import DomainEvent
from .entity import Entity, IdType


@dataclass(eq=False)
class AggregateRoot(Entity[IdType], Generic[IdType]):
    """
    Base class for Aggregate Roots in the domain model.

    Aggregate Roots are:
    - Entry point to an aggregate (cluster of related entities)
    - Responsible for maintaining invariants
    - The only entity referenced from outside the aggregate
    - Can record domain events for later dispatch

    Domain events are collected and dispatched by the application layer
    after the aggregate is saved.
    """

    _events: list[DomainEvent] = field(
        default_factory=list, repr=False, compare=False, kw_only=True
    )

    def _record_event(self, event: DomainEvent) -> None:
        """Record a domain event to be dispatched later."""
        self._events.append(event)

    def collect_events(self) -> list[DomainEvent]:
        """
        Collect and clear all recorded domain events.

        This is called by the application layer after saving the aggregate.
        """
        events = self._events.copy()
        self._events.clear()
        return events

    @property
    def pending_events(self) -> list[DomainEvent]:
        """Return pending events without clearing them."""
        return self._events.copy()

    def __getstate__(self) -> dict[str, object]:
        # Pending events are not part of the stored state.
        state = self.__dict__.copy()
        state["_events"] = []
        return state
