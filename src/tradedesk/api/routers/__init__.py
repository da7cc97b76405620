"""API routers package."""

from tradedesk.api.routers.trades import router as trades_router
from tradedesk.api.routers.portfolio import router as portfolio_router
from tradedesk.api.routers.market import router as market_router
from tradedesk.api.routers.watchlist import router as watchlist_router

__all__ = [
    "trades_router",
    "portfolio_router",
    "market_router",
    "watchlist_router",
]
