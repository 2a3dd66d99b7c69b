from .car_store import InMemoryCarStore
from .person_store import InMemoryPersonStore

__all__ = ["InMemoryCarStore", "InMemoryPersonStore"]
