"""Service layer - business logic orchestration."""

from tradedesk.services.ledger_service import LedgerService
from tradedesk.services.portfolio_engine import (
    PortfolioEngine,
    compute_positions,
    replay_ledger,
    summarize_positions,
)
from tradedesk.services.quote_cache import QuoteCache
from tradedesk.services.watchlist_service import WatchlistService
from tradedesk.services.market_data_service import MarketDataService

__all__ = [
    "LedgerService",
    "PortfolioEngine",
    "compute_positions",
    "replay_ledger",
    "summarize_positions",
    "QuoteCache",
    "WatchlistService",
    "MarketDataService",
]
