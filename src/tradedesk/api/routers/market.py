"""Market data endpoints (served through the quote cache)."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradedesk.api.deps import get_market_data_service
from tradedesk.api.schemas import (
    QuoteResponse,
    QuotesResponse,
    SingleQuoteResponse,
    NewsArticleResponse,
    NewsResponse,
)
from tradedesk.services import MarketDataService

router = APIRouter(prefix="/market", tags=["market"])


@router.get("/quotes", response_model=QuotesResponse)
def get_quotes(
    symbols: Optional[str] = Query(None, description="Comma-separated symbols (watchlist if empty)"),
    market: MarketDataService = Depends(get_market_data_service),
) -> QuotesResponse:
    """Get quotes for the given symbols or the watchlist."""
    if symbols:
        result = market.get_quotes(symbols.split(","))
    else:
        result = market.get_watchlist_quotes()
    return QuotesResponse(
        quotes=[QuoteResponse.from_view(q) for q in result.items],
        is_demo=result.is_demo,
        fetched_at=result.fetched_at,
    )


@router.get("/quotes/{symbol}", response_model=SingleQuoteResponse)
def get_quote(
    symbol: str,
    market: MarketDataService = Depends(get_market_data_service),
) -> SingleQuoteResponse:
    """Get a single quote."""
    result = market.get_quote(symbol)
    return SingleQuoteResponse(
        quote=QuoteResponse.from_view(result.items[0]),
        is_demo=result.is_demo,
    )


@router.get("/news", response_model=NewsResponse)
def get_news(
    limit: Optional[int] = Query(None, ge=1, le=100),
    market: MarketDataService = Depends(get_market_data_service),
) -> NewsResponse:
    """Get general market news."""
    result = market.get_news(limit)
    return NewsResponse(
        articles=[NewsArticleResponse.from_view(a) for a in result.items],
        is_demo=result.is_demo,
        fetched_at=result.fetched_at,
    )
