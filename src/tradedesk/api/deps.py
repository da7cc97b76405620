"""Dependency injection for FastAPI."""

from fastapi import Depends

from tradedesk.app_context import AppContext, get_app_context
from tradedesk.services import (
    LedgerService,
    PortfolioEngine,
    WatchlistService,
    MarketDataService,
)


def get_context() -> AppContext:
    """Provide the initialized application context."""
    context = get_app_context()
    context.initialize()
    return context


def get_ledger_service(context: AppContext = Depends(get_context)) -> LedgerService:
    """Provide LedgerService instance."""
    return context.ledger


def get_portfolio_engine(context: AppContext = Depends(get_context)) -> PortfolioEngine:
    """Provide PortfolioEngine instance."""
    return context.portfolio


def get_watchlist_service(context: AppContext = Depends(get_context)) -> WatchlistService:
    """Provide WatchlistService instance."""
    return context.watchlist


def get_market_data_service(context: AppContext = Depends(get_context)) -> MarketDataService:
    """Provide MarketDataService instance."""
    return context.market_data
