"""Domain core of the GraphQL chat tutorial API."""

__version__ = "0.1.0"
