"""Application context owning the long-lived services.

The quote cache is process-wide: one QuoteCache instance lives here and is
injected into the market data service, instead of being module state.
"""

import logging
import time
from typing import Callable, Optional

from sqlalchemy.orm import sessionmaker

from tradedesk.config.settings import Settings, get_settings
from tradedesk.repositories.sqlalchemy.database import init_db, get_session_factory
from tradedesk.repositories.sqlalchemy import SqlAlchemyStorageRepository
from tradedesk.providers.market_data_provider import MarketDataProvider
from tradedesk.providers.stub_provider import StubMarketDataProvider
from tradedesk.providers.live_provider import LiveMarketDataProvider
from tradedesk.services import (
    LedgerService,
    PortfolioEngine,
    QuoteCache,
    WatchlistService,
    MarketDataService,
)

logger = logging.getLogger(__name__)


class AppContext:
    """
    Wires repositories, providers and services together.

    Everything is created once by initialize(); the API layer reads the
    services from here.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session_factory: Optional[sessionmaker] = None,
        provider: Optional[MarketDataProvider] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._settings = settings
        self._session_factory = session_factory
        self._provider = provider
        self._clock = clock
        self._initialized = False

        self._storage: Optional[SqlAlchemyStorageRepository] = None
        self._ledger_service: Optional[LedgerService] = None
        self._portfolio_engine: Optional[PortfolioEngine] = None
        self._watchlist_service: Optional[WatchlistService] = None
        self._quote_cache: Optional[QuoteCache] = None
        self._market_data_service: Optional[MarketDataService] = None

    def initialize(self) -> None:
        """Create services and load the persisted ledger and watchlist (idempotent)."""
        if self._initialized:
            return

        settings = self.settings
        if self._session_factory is None:
            init_db()
            self._session_factory = get_session_factory()

        self._storage = SqlAlchemyStorageRepository(self._session_factory)
        self._ledger_service = LedgerService(
            storage=self._storage,
            storage_key=settings.trades_storage_key,
        )
        self._portfolio_engine = PortfolioEngine(ledger_service=self._ledger_service)
        self._watchlist_service = WatchlistService(
            storage=self._storage,
            storage_key=settings.watchlist_storage_key,
            default_symbols=settings.default_watchlist,
        )
        self._quote_cache = QuoteCache(
            ttl_seconds=settings.quote_cache_ttl_seconds,
            clock=self._clock,
        )
        self._market_data_service = MarketDataService(
            provider=self._provider or self._build_provider(settings),
            cache=self._quote_cache,
            fallback=StubMarketDataProvider(),
            watchlist=self._watchlist_service,
            news_limit=settings.news_limit,
        )

        trades = self._ledger_service.load_ledger()
        self._watchlist_service.load()
        logger.info("Loaded ledger with %d trades", len(trades))
        self._initialized = True

    @staticmethod
    def _build_provider(settings: Settings) -> MarketDataProvider:
        if settings.use_live_provider:
            return LiveMarketDataProvider(
                finnhub_api_key=settings.finnhub_api_key,
                timeout_seconds=settings.quote_fetch_timeout_seconds,
            )
        return StubMarketDataProvider()

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def _require(self, service):
        if not self._initialized:
            self.initialize()
        return getattr(self, service)

    @property
    def ledger(self) -> LedgerService:
        """Get the LedgerService instance."""
        return self._require("_ledger_service")

    @property
    def portfolio(self) -> PortfolioEngine:
        """Get the PortfolioEngine instance."""
        return self._require("_portfolio_engine")

    @property
    def watchlist(self) -> WatchlistService:
        """Get the WatchlistService instance."""
        return self._require("_watchlist_service")

    @property
    def quote_cache(self) -> QuoteCache:
        """Get the process-wide QuoteCache."""
        return self._require("_quote_cache")

    @property
    def market_data(self) -> MarketDataService:
        """Get the MarketDataService instance."""
        return self._require("_market_data_service")


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set (or clear, with None) the global application context."""
    global _app_context
    _app_context = context
