"""TradeRecord domain model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from tradedesk.domain.models.enums import TradeSide


@dataclass(frozen=True)
class TradeRecord:
    """
    Ledger entry (source of truth for the portfolio).

    - symbol is trimmed and upper-cased
    - quantity > 0, price >= 0, both finite
    - timestamp is for display only; the ledger is folded in insertion order
    """

    trade_id: str
    symbol: str
    side: TradeSide
    quantity: Decimal
    price: Decimal
    timestamp: datetime

    @property
    def notional(self) -> Decimal:
        """Return quantity * price."""
        return self.quantity * self.price

    def to_storage(self) -> dict:
        """Serialize to the stored JSON shape."""
        return {
            "id": self.trade_id,
            "symbol": self.symbol,
            "type": self.side.value.lower(),
            "quantity": str(self.quantity),
            "price": str(self.price),
            "date": self.timestamp.isoformat(),
        }
