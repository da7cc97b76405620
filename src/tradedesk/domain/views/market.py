"""View models for market data."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class Quote:
    """Market quote for a symbol."""

    symbol: str
    name: str
    price: Decimal
    change: Decimal
    change_percent: Decimal
    volume: int
    as_of: Optional[datetime] = None


@dataclass
class NewsArticle:
    """A market news headline."""

    headline: str
    source: str
    url: str
    published_at: datetime
    summary: str
    related_tickers: list[str] = field(default_factory=list)


@dataclass
class MarketDataResult(Generic[T]):
    """
    Payload served through the quote cache.

    is_demo is True when any part of the payload came from the synthetic
    fallback, so clients can show a "demo data" notice.
    """

    items: list[T] = field(default_factory=list)
    is_demo: bool = False
    fetched_at: Optional[datetime] = None
