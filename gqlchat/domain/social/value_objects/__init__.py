from .car_model import CarModel

__all__ = ["CarModel"]
