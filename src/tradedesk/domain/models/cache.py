"""Cache entry model for the quote cache."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """
    Cached fetch result.

    fetched_at is a reading of the cache's clock (monotonic seconds).
    Entries are replaced, never merged.
    """

    payload: Any
    fetched_at: float
    is_fallback: bool = False

    def age(self, now: float) -> float:
        return now - self.fetched_at
