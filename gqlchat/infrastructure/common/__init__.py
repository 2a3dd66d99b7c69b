from .event_bus import InMemoryEventBus
from .in_memory_store import InMemoryStore

__all__ = ["InMemoryEventBus", "InMemoryStore"]
