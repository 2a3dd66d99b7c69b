import structlog
from dependency_injector import containers, providers

from gqlchat.application.chat.use_cases.add_member_use_case import AddMemberUseCase
from gqlchat.application.chat.use_cases.conversation_query_use_case import (
    ConversationQueryUseCase,
)
from gqlchat.application.chat.use_cases.publish_message_use_case import PublishMessageUseCase
from gqlchat.application.chat.use_cases.start_conversation_use_case import (
    StartConversationUseCase,
)
from gqlchat.application.chat.use_cases.subscribe_to_conversation_use_case import (
    SubscribeToConversationUseCase,
)
from gqlchat.application.identity.use_cases.authenticate_user_use_case import (
    AuthenticateUserUseCase,
)
from gqlchat.application.identity.use_cases.get_current_user_use_case import (
    GetCurrentUserUseCase,
)
from gqlchat.application.identity.use_cases.get_user_use_case import GetUserUseCase
from gqlchat.application.identity.use_cases.register_user_use_case import RegisterUserUseCase
from gqlchat.application.social.use_cases.car_use_case import CarUseCase
from gqlchat.application.social.use_cases.people_use_case import PeopleUseCase
from gqlchat.config import Settings, configure_logging, get_settings
from gqlchat.infrastructure.chat.stores import InMemoryConversationStore
from gqlchat.infrastructure.common.event_bus import InMemoryEventBus
from gqlchat.infrastructure.identity.stores import InMemoryUserStore
from gqlchat.infrastructure.seed import seed_demo_data
from gqlchat.infrastructure.social.stores import InMemoryCarStore, InMemoryPersonStore

logger = structlog.get_logger(__name__)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Stores: one instance per aggregate kind for the life of the container
    user_store = providers.Singleton(InMemoryUserStore)
    conversation_store = providers.Singleton(InMemoryConversationStore)
    person_store = providers.Singleton(InMemoryPersonStore)
    car_store = providers.Singleton(InMemoryCarStore)

    event_bus = providers.Singleton(InMemoryEventBus)

    # Identity module, application use cases
    register_user_use_case = providers.Factory(RegisterUserUseCase, user_store=user_store)
    authenticate_user_use_case = providers.Factory(AuthenticateUserUseCase, user_store=user_store)
    get_current_user_use_case = providers.Factory(GetCurrentUserUseCase, user_store=user_store)
    get_user_use_case = providers.Factory(GetUserUseCase, user_store=user_store)

    # Chat module, application use cases
    start_conversation_use_case = providers.Factory(
        StartConversationUseCase,
        conversation_store=conversation_store,
        user_store=user_store,
    )
    add_member_use_case = providers.Factory(
        AddMemberUseCase,
        conversation_store=conversation_store,
        user_store=user_store,
        event_publisher=event_bus,
    )
    publish_message_use_case = providers.Factory(
        PublishMessageUseCase,
        conversation_store=conversation_store,
        user_store=user_store,
        event_publisher=event_bus,
    )
    conversation_query_use_case = providers.Factory(
        ConversationQueryUseCase,
        conversation_store=conversation_store,
    )
    subscribe_to_conversation_use_case = providers.Factory(
        SubscribeToConversationUseCase,
        conversation_store=conversation_store,
        event_subscriber=event_bus,
    )

    # Social module, application use cases
    people_use_case = providers.Factory(PeopleUseCase, person_store=person_store)
    car_use_case = providers.Factory(CarUseCase, car_store=car_store, person_store=person_store)


def bootstrap(settings: Settings | None = None) -> Container:
    """
    Build the process-wide container.

    Configures logging, creates the stores and, when enabled, loads the
    demo data. Call once at startup and hand the container to the
    resolver layer.
    """
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    container = Container()
    if settings.SEED_DEMO_DATA:
        seed_demo_data(container.people_use_case(), container.car_use_case())

    logger.info(
        "container_ready",
        project=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )
    return container
