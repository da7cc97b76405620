"""Pydantic schemas for trade endpoints."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from tradedesk.domain.models import TradeRecord


class TradeCreateRequest(BaseModel):
    """
    Request schema for recording a trade.

    Range checks (quantity > 0, price >= 0, non-empty symbol) are done by
    the ledger so API and in-process callers share one rule set.
    """

    symbol: str = Field(..., max_length=20, description="Ticker symbol")
    side: str = Field(..., description="buy or sell")
    quantity: Decimal = Field(..., description="Units traded")
    price: Decimal = Field(..., description="Execution price per unit")


class TradeResponse(BaseModel):
    """Response schema for a single trade."""

    id: str
    symbol: str
    side: str
    quantity: float
    price: float
    timestamp: datetime

    @classmethod
    def from_record(cls, trade: TradeRecord) -> "TradeResponse":
        return cls(
            id=trade.trade_id,
            symbol=trade.symbol,
            side=trade.side.value,
            quantity=float(trade.quantity),
            price=float(trade.price),
            timestamp=trade.timestamp,
        )


class TradeListResponse(BaseModel):
    """Response schema for listing trades (ledger order)."""

    trades: list[TradeResponse]
    count: int
