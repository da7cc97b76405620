"""Pydantic schemas for market data and watchlist endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from tradedesk.domain.views import Quote, NewsArticle


class QuoteResponse(BaseModel):
    """Market quote."""

    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    as_of: Optional[datetime] = None

    @classmethod
    def from_view(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            symbol=quote.symbol,
            name=quote.name,
            price=float(quote.price),
            change=float(quote.change),
            change_percent=float(quote.change_percent),
            volume=quote.volume,
            as_of=quote.as_of,
        )


class QuotesResponse(BaseModel):
    """Quotes for a symbol set; is_demo flags synthetic data."""

    quotes: list[QuoteResponse]
    is_demo: bool
    fetched_at: Optional[datetime] = None


class SingleQuoteResponse(BaseModel):
    """One quote; is_demo flags synthetic data."""

    quote: QuoteResponse
    is_demo: bool


class NewsArticleResponse(BaseModel):
    """News headline."""

    headline: str
    source: str
    url: str
    published_at: datetime
    summary: str
    related_tickers: list[str]

    @classmethod
    def from_view(cls, article: NewsArticle) -> "NewsArticleResponse":
        return cls(
            headline=article.headline,
            source=article.source,
            url=article.url,
            published_at=article.published_at,
            summary=article.summary,
            related_tickers=list(article.related_tickers),
        )


class NewsResponse(BaseModel):
    """News list; is_demo flags synthetic data."""

    articles: list[NewsArticleResponse]
    is_demo: bool
    fetched_at: Optional[datetime] = None


class WatchlistResponse(BaseModel):
    """Watched symbols (defaults followed by user extras)."""

    symbols: list[str]
    extra_symbols: list[str]


class WatchlistAddRequest(BaseModel):
    """Request schema for adding a watchlist symbol."""

    symbol: str = Field(..., min_length=1, max_length=20)
