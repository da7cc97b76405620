"""Repository protocol definitions (interfaces)."""

from tradedesk.repositories.protocols.storage_repo import StorageRepository

__all__ = [
    "StorageRepository",
]
