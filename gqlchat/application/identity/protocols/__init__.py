from .user_store import UserStoreProtocol

__all__ = ["UserStoreProtocol"]
