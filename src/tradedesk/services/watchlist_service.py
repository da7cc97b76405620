"""Watchlist service: default trending symbols plus user-added tickers."""

import json
import logging
import threading
from typing import Optional

from tradedesk.config.settings import DEFAULT_WATCHLIST
from tradedesk.core.exceptions import ValidationError
from tradedesk.repositories.protocols import StorageRepository

logger = logging.getLogger(__name__)

MAX_SYMBOL_LENGTH = 20


class WatchlistService:
    """Keeps the user's extra symbols in a storage slot as a JSON array."""

    def __init__(
        self,
        storage: StorageRepository,
        storage_key: str = "watchlist",
        default_symbols: Optional[list[str]] = None,
    ):
        self._storage = storage
        self._storage_key = storage_key
        self._defaults = [s.upper() for s in (default_symbols or DEFAULT_WATCHLIST)]
        self._extras: Optional[list[str]] = None
        self._lock = threading.Lock()

    def load(self) -> list[str]:
        """(Re)load the extra symbols; absent or corrupt storage yields none."""
        extras = self._read_storage()
        with self._lock:
            self._extras = extras
        return list(extras)

    def extra_symbols(self) -> list[str]:
        if self._extras is None:
            self.load()
        return list(self._extras)

    def symbols(self) -> list[str]:
        """Default symbols followed by user extras."""
        return self._defaults + self.extra_symbols()

    def add_symbol(self, symbol: str) -> bool:
        """Add symbol; returns False if it is already watched."""
        clean = self._normalize(symbol)
        current = self.extra_symbols()
        if clean in self._defaults or clean in current:
            return False
        with self._lock:
            updated = [*current, clean]
            self._persist(updated)
            self._extras = updated
        logger.info("Added %s to watchlist", clean)
        return True

    def remove_symbol(self, symbol: str) -> bool:
        """Remove a user-added symbol; returns False if it was not present."""
        clean = self._normalize(symbol)
        current = self.extra_symbols()
        if clean not in current:
            return False
        with self._lock:
            updated = [s for s in current if s != clean]
            self._persist(updated)
            self._extras = updated
        logger.info("Removed %s from watchlist", clean)
        return True

    @staticmethod
    def _normalize(symbol: str) -> str:
        clean = (symbol or "").strip().upper()
        if not clean:
            raise ValidationError("Watchlist symbol cannot be empty")
        if len(clean) > MAX_SYMBOL_LENGTH:
            raise ValidationError(f"Watchlist symbol too long: {clean}")
        return clean

    def _read_storage(self) -> list[str]:
        try:
            raw = self._storage.get(self._storage_key)
        except Exception:
            logger.warning("Could not read watchlist storage; starting empty", exc_info=True)
            return []
        if raw is None:
            return []
        try:
            items = json.loads(raw)
        except ValueError:
            logger.warning("Watchlist storage is not valid JSON; starting empty")
            return []
        if not isinstance(items, list):
            return []

        extras: list[str] = []
        for item in items:
            if isinstance(item, str) and item.strip():
                symbol = item.strip().upper()
                if symbol not in extras and symbol not in self._defaults:
                    extras.append(symbol)
        return extras

    def _persist(self, extras: list[str]) -> None:
        self._storage.put(self._storage_key, json.dumps(extras))
