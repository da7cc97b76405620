"""Ledger service for trade management."""

import json
import logging
import threading
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union

from tradedesk.core.exceptions import ValidationError
from tradedesk.core.timezone import now_eastern, parse_timestamp
from tradedesk.domain.models import TradeRecord, TradeSide
from tradedesk.repositories.protocols import StorageRepository

logger = logging.getLogger(__name__)

NumberLike = Union[str, int, float, Decimal]

# Accepted magnitude for quantity and price: zero, or 1e-12 <= |n| < 1e15.
# Products and sums of values in this range stay inside the default
# Decimal context, so replaying the ledger cannot overflow.
MAX_MAGNITUDE = Decimal("1e15")
MIN_MAGNITUDE = Decimal("1e-12")


def _parse_number(value: Any) -> Optional[Decimal]:
    """Parse a user-supplied number; None if it is not a finite in-range number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        value = str(value)
    try:
        number = Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, ValueError, TypeError):
        return None
    if not number.is_finite():
        return None
    magnitude = abs(number)
    if magnitude >= MAX_MAGNITUDE or (magnitude and magnitude < MIN_MAGNITUDE):
        return None
    return number


class LedgerService:
    """
    Service for managing the trade ledger.

    The ledger is an ordered list of TradeRecord kept in insertion order and
    persisted as one JSON document in a storage slot. It is the only source
    of truth; positions are always derived from it.
    """

    def __init__(
        self,
        storage: StorageRepository,
        storage_key: str = "trades",
    ):
        self._storage = storage
        self._storage_key = storage_key
        self._trades: Optional[list[TradeRecord]] = None
        self._last_id = 0
        self._lock = threading.Lock()

    def load_ledger(self) -> list[TradeRecord]:
        """
        (Re)load the ledger from storage.

        Absent, unreadable or unparsable storage yields an empty ledger.
        Malformed records inside a valid document are skipped.
        """
        trades = self._read_storage()
        with self._lock:
            self._trades = trades
            self._last_id = max(
                (
                    int(t.trade_id) for t in trades
                    if t.trade_id.isascii() and t.trade_id.isdecimal()
                ),
                default=0,
            )
        return list(trades)

    def list_trades(self) -> list[TradeRecord]:
        """Return the ledger in insertion order."""
        return list(self._ensure_loaded())

    def get_trade(self, trade_id: str) -> Optional[TradeRecord]:
        """Return the trade with trade_id, if present."""
        return next((t for t in self._ensure_loaded() if t.trade_id == trade_id), None)

    def add_trade(
        self,
        symbol: str,
        side: Union[str, TradeSide],
        quantity: NumberLike,
        price: NumberLike,
        strict: bool = False,
    ) -> Optional[TradeRecord]:
        """
        Append a new trade and persist the ledger.

        Invalid input leaves the ledger unchanged and returns None, or
        raises ValidationError when strict is set.
        """
        try:
            clean_symbol, clean_side, clean_qty, clean_price = self._validate(
                symbol, side, quantity, price
            )
        except ValidationError as exc:
            if strict:
                raise
            logger.info("Rejected trade input: %s", exc.message)
            return None

        self._ensure_loaded()
        with self._lock:
            timestamp = now_eastern()
            trade = TradeRecord(
                trade_id=self._next_id(int(timestamp.timestamp() * 1000)),
                symbol=clean_symbol,
                side=clean_side,
                quantity=clean_qty,
                price=clean_price,
                timestamp=timestamp,
            )
            updated = [*self._trades, trade]
            self._persist(updated)
            self._trades = updated
            self._last_id = int(trade.trade_id)

        logger.info(
            "Recorded %s %s %s @ %s (id=%s)",
            trade.side.value, trade.quantity, trade.symbol, trade.price, trade.trade_id,
        )
        return trade

    def delete_trade(self, trade_id: str) -> bool:
        """
        Remove the trade with trade_id and persist the ledger.

        Returns False (and leaves the ledger untouched) if no such trade exists.
        """
        self._ensure_loaded()
        with self._lock:
            updated = [t for t in self._trades if t.trade_id != trade_id]
            if len(updated) == len(self._trades):
                logger.debug("Delete ignored, trade not found: %s", trade_id)
                return False
            self._persist(updated)
            self._trades = updated

        logger.info("Deleted trade %s", trade_id)
        return True

    def _ensure_loaded(self) -> list[TradeRecord]:
        if self._trades is None:
            self.load_ledger()
        return self._trades

    def _next_id(self, candidate: int) -> str:
        """Creation-time id in epoch ms, bumped past the last id on collision."""
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        return str(candidate)

    @staticmethod
    def _validate(
        symbol: Any,
        side: Any,
        quantity: Any,
        price: Any,
    ) -> tuple[str, TradeSide, Decimal, Decimal]:
        """Validate and normalize trade input."""
        clean_symbol = symbol.strip().upper() if isinstance(symbol, str) else ""
        if not clean_symbol:
            raise ValidationError("Trade requires a symbol")

        try:
            clean_side = TradeSide.parse(side)
        except ValueError:
            raise ValidationError(f"Invalid trade side: {side!r}") from None

        clean_qty = _parse_number(quantity)
        if clean_qty is None or clean_qty <= 0:
            raise ValidationError("Trade requires a quantity > 0 and below 1e15")

        clean_price = _parse_number(price)
        if clean_price is None or clean_price < 0:
            raise ValidationError("Trade requires a price >= 0 and below 1e15")

        return clean_symbol, clean_side, clean_qty, clean_price

    def _read_storage(self) -> list[TradeRecord]:
        try:
            raw = self._storage.get(self._storage_key)
        except Exception:
            logger.warning("Could not read trade storage; starting empty", exc_info=True)
            return []
        if raw is None:
            return []

        try:
            items = json.loads(raw)
        except ValueError:
            logger.warning("Trade storage is not valid JSON; starting empty")
            return []
        if not isinstance(items, list):
            logger.warning("Trade storage is not a list; starting empty")
            return []

        trades: list[TradeRecord] = []
        for item in items:
            trade = self._from_storage(item)
            if trade is None:
                logger.warning("Skipping malformed stored trade: %r", item)
                continue
            trades.append(trade)
        return trades

    def _from_storage(self, item: Any) -> Optional[TradeRecord]:
        if not isinstance(item, dict) or item.get("id") in (None, ""):
            return None
        try:
            symbol, side, quantity, price = self._validate(
                item.get("symbol"), item.get("type"), item.get("quantity"), item.get("price")
            )
            timestamp = parse_timestamp(item["date"])
        except (ValidationError, KeyError, ValueError, TypeError, OverflowError):
            return None
        return TradeRecord(
            trade_id=str(item["id"]),
            symbol=symbol,
            side=side,
            quantity=quantity,
            price=price,
            timestamp=timestamp,
        )

    def _persist(self, trades: list[TradeRecord]) -> None:
        self._storage.put(
            self._storage_key,
            json.dumps([t.to_storage() for t in trades]),
        )
