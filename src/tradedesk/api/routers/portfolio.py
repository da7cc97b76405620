"""Portfolio endpoints derived from the trade ledger."""

from fastapi import APIRouter, Depends, Query

from tradedesk.api.deps import get_portfolio_engine
from tradedesk.api.schemas import (
    PositionResponse,
    PortfolioSummaryResponse,
    OversellResponse,
    PortfolioResponse,
    PositionsResponse,
)
from tradedesk.services import PortfolioEngine

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(
    portfolio: PortfolioEngine = Depends(get_portfolio_engine),
) -> PortfolioResponse:
    """Return open positions, aggregates and clamped oversells."""
    snapshot = portfolio.snapshot()
    positions = [
        snapshot.positions[symbol]
        for symbol in sorted(snapshot.positions)
        if snapshot.positions[symbol].is_open
    ]
    return PortfolioResponse(
        positions=[PositionResponse.from_view(p) for p in positions],
        summary=PortfolioSummaryResponse.from_view(snapshot.summary),
        oversells=[OversellResponse.from_view(w) for w in snapshot.oversells],
    )


@router.get("/positions", response_model=PositionsResponse)
def get_positions(
    include_closed: bool = Query(False, description="Include flat positions with realized P/L"),
    portfolio: PortfolioEngine = Depends(get_portfolio_engine),
) -> PositionsResponse:
    """Return positions sorted by symbol."""
    return PositionsResponse(
        positions=[
            PositionResponse.from_view(p)
            for p in portfolio.get_positions(include_closed=include_closed)
        ]
    )
