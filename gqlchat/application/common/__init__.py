"""
Application common module.

Contains the ports shared by every use case:
- StoreProtocol: keyed load/save/all over one aggregate kind
- EventPublisherProtocol: dispatch of recorded domain events
"""

from .event_publisher import EventPublisherProtocol
from .store import StoreProtocol

__all__ = ["EventPublisherProtocol", "StoreProtocol"]
