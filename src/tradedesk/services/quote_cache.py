"""Time-boxed cache in front of market data fetches."""

import logging
import threading
import time
from typing import Any, Callable, Optional

from tradedesk.domain.models import CacheEntry

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


class QuoteCache:
    """
    Keyed cache of fetch results with a fixed freshness window.

    An entry is served while its age is strictly below the window. Stale
    entries are superseded by the next put for the same key, never merged.
    Concurrent misses for one key are not deduplicated: each caller fetches
    and the last put wins.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def get(self, key: str) -> Optional[Any]:
        """Return the cached payload for key, or None when absent or stale."""
        entry = self.get_entry(key)
        return entry.payload if entry else None

    def get_entry(self, key: str) -> Optional[CacheEntry]:
        """Return the fresh entry for key, or None."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None or entry.age(self._clock()) >= self._ttl:
            return None
        return entry

    def put(self, key: str, payload: Any, is_fallback: bool = False) -> CacheEntry:
        """Store payload under key stamped with the current time."""
        entry = CacheEntry(payload=payload, fetched_at=self._clock(), is_fallback=is_fallback)
        with self._lock:
            self._entries[key] = entry
        return entry

    def fetch_with_fallback(
        self,
        key: str,
        primary_fetch: Callable[[], Any],
        fallback_generate: Callable[[], Any],
    ) -> Any:
        """
        Return a fresh cached payload, else fetch it.

        Any exception from primary_fetch is logged and replaced by
        fallback_generate(). Either result is cached before being returned,
        so callers never see a fetch failure.
        """
        entry = self.get_entry(key)
        if entry is not None:
            return entry.payload

        try:
            payload = primary_fetch()
        except Exception as exc:
            logger.warning("Fetch for %s failed, using fallback data: %s", key, exc)
            payload = fallback_generate()
            self.put(key, payload, is_fallback=True)
            return payload

        self.put(key, payload)
        return payload

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
