"""Key/value storage repository protocol."""

from typing import Protocol, Optional


class StorageRepository(Protocol):
    """
    Interface for named durable storage slots.

    Each slot holds one serialized document and is rewritten in full.
    """

    def get(self, key: str) -> Optional[str]:
        """Return the raw value stored under key, or None if the slot is empty."""
        ...

    def put(self, key: str, value: str) -> None:
        """Replace the value stored under key."""
        ...

    def delete(self, key: str) -> None:
        """Remove the slot (no-op if absent)."""
        ...
