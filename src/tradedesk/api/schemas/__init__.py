"""Pydantic schemas for API request/response."""

from tradedesk.api.schemas.trade import (
    TradeCreateRequest,
    TradeResponse,
    TradeListResponse,
)
from tradedesk.api.schemas.portfolio import (
    PositionResponse,
    PortfolioSummaryResponse,
    OversellResponse,
    PortfolioResponse,
    PositionsResponse,
)
from tradedesk.api.schemas.market import (
    QuoteResponse,
    QuotesResponse,
    SingleQuoteResponse,
    NewsArticleResponse,
    NewsResponse,
    WatchlistResponse,
    WatchlistAddRequest,
)

__all__ = [
    "TradeCreateRequest",
    "TradeResponse",
    "TradeListResponse",
    "PositionResponse",
    "PortfolioSummaryResponse",
    "OversellResponse",
    "PortfolioResponse",
    "PositionsResponse",
    "QuoteResponse",
    "QuotesResponse",
    "SingleQuoteResponse",
    "NewsArticleResponse",
    "NewsResponse",
    "WatchlistResponse",
    "WatchlistAddRequest",
]
