from .car import Car
from .person import Person

__all__ = ["Car", "Person"]
