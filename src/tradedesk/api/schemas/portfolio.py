"""Pydantic schemas for portfolio endpoints."""

from pydantic import BaseModel

from tradedesk.domain.views import Position, PortfolioSummary, OversellWarning


class PositionResponse(BaseModel):
    """A single derived position."""

    symbol: str
    quantity: float
    average_cost: float
    total_cost: float
    realized_pl: float

    @classmethod
    def from_view(cls, position: Position) -> "PositionResponse":
        return cls(
            symbol=position.symbol,
            quantity=float(position.quantity),
            average_cost=float(position.average_cost),
            total_cost=float(position.total_cost),
            realized_pl=float(position.realized_pl),
        )


class PortfolioSummaryResponse(BaseModel):
    """Portfolio aggregates."""

    total_invested: float
    total_realized_pl: float
    active_positions: int
    total_trades: int

    @classmethod
    def from_view(cls, summary: PortfolioSummary) -> "PortfolioSummaryResponse":
        return cls(
            total_invested=float(summary.total_invested),
            total_realized_pl=float(summary.total_realized_pl),
            active_positions=summary.active_positions,
            total_trades=summary.total_trades,
        )


class OversellResponse(BaseModel):
    """A sell that was clamped to the held quantity."""

    trade_id: str
    symbol: str
    requested: float
    held: float

    @classmethod
    def from_view(cls, warning: OversellWarning) -> "OversellResponse":
        return cls(
            trade_id=warning.trade_id,
            symbol=warning.symbol,
            requested=float(warning.requested),
            held=float(warning.held),
        )


class PortfolioResponse(BaseModel):
    """Positions, aggregates and oversell warnings for the whole ledger."""

    positions: list[PositionResponse]
    summary: PortfolioSummaryResponse
    oversells: list[OversellResponse]


class PositionsResponse(BaseModel):
    """Positions only."""

    positions: list[PositionResponse]
