from .car_use_case import CarUseCase
from .people_use_case import PeopleUseCase

__all__ = ["CarUseCase", "PeopleUseCase"]
