"""Repository layer - data access abstractions and implementations."""

from tradedesk.repositories.protocols import StorageRepository

__all__ = [
    "StorageRepository",
]
