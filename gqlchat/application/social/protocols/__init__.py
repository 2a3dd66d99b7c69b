from .car_store import CarStoreProtocol
from .person_store import PersonStoreProtocol

__all__ = ["CarStoreProtocol", "PersonStoreProtocol"]
