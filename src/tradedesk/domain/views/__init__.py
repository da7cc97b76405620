"""View models for service outputs."""

from tradedesk.domain.views.portfolio import (
    Position,
    PortfolioSummary,
    OversellWarning,
    PortfolioSnapshot,
)
from tradedesk.domain.views.market import (
    Quote,
    NewsArticle,
    MarketDataResult,
)

__all__ = [
    "Position",
    "PortfolioSummary",
    "OversellWarning",
    "PortfolioSnapshot",
    "Quote",
    "NewsArticle",
    "MarketDataResult",
]
