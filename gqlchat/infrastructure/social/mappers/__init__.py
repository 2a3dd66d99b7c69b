from .social_mapper import CarMapper, PersonMapper

__all__ = ["CarMapper", "PersonMapper"]
