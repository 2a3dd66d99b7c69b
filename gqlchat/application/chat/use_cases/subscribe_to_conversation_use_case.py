"""Use case for following new messages of one conversation."""

from collections.abc import Callable

import structlog

from gqlchat.application.chat.protocols.conversation_store import ConversationStoreProtocol
from gqlchat.application.chat.protocols.event_subscriber import EventSubscriberProtocol
from gqlchat.application.chat.use_cases._lookups import load_conversation
from gqlchat.domain.chat.events import MessagePublished
from gqlchat.domain.common.domain_event import DomainEvent

logger = structlog.get_logger(__name__)

MessageHandler = Callable[[MessagePublished], None]


class SubscribeToConversationUseCase:
    """Use case for following new messages of one conversation."""

    def __init__(
        self,
        conversation_store: ConversationStoreProtocol,
        event_subscriber: EventSubscriberProtocol,
    ) -> None:
        """Initialize use case with dependencies."""
        self.conversation_store = conversation_store
        self.event_subscriber = event_subscriber

    def subscribe(self, conversation_id: str, handler: MessageHandler) -> Callable[[], None]:
        """
        Call ``handler`` for every message published in the conversation.

        Messages of other conversations are filtered out.

        Returns:
            Callable that cancels the subscription

        Raises:
            ConversationNotFoundError: If the conversation does not exist
        """
        conversation = load_conversation(self.conversation_store, conversation_id)

        def in_conversation(event: DomainEvent) -> bool:
            return isinstance(event, MessagePublished) and event.conversation_id == conversation.id

        unsubscribe = self.event_subscriber.subscribe(
            MessagePublished,
            handler,  # type: ignore[arg-type]
            in_conversation,
        )

        logger.debug("conversation_subscribed", conversation_id=conversation_id)

        return unsubscribe
