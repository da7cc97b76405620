"""
Pytest configuration and fixtures for trade desk tests.

This module provides:
- In-memory SQLite storage fixtures
- A controllable clock for quote cache freshness tests
- Deterministic and failing market data providers
- Service fixtures and a FastAPI test client
- Helpers for building trade records directly
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from fastapi.testclient import TestClient

from tradedesk.main import app
from tradedesk.app_context import AppContext, set_app_context
from tradedesk.config.settings import Settings, reset_settings
from tradedesk.core.exceptions import ProviderError
from tradedesk.core.timezone import EASTERN_TZ
from tradedesk.domain.models import TradeRecord, TradeSide
from tradedesk.domain.views import Quote, NewsArticle
from tradedesk.repositories.sqlalchemy.database import Base, create_session_factory
# Import ORM models to register them with Base before creating tables
from tradedesk.repositories.sqlalchemy import orm_models  # noqa: F401
from tradedesk.repositories.sqlalchemy import SqlAlchemyStorageRepository
from tradedesk.providers.stub_provider import StubMarketDataProvider
from tradedesk.services import (
    LedgerService,
    PortfolioEngine,
    QuoteCache,
    WatchlistService,
    MarketDataService,
)


# =============================================================================
# TIME HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
def storage_repo(session_factory) -> SqlAlchemyStorageRepository:
    """Provide test StorageRepository."""
    return SqlAlchemyStorageRepository(session_factory)


class UnreadableStorage:
    """Storage whose reads always fail."""

    def get(self, key: str) -> Optional[str]:
        raise OSError("storage unavailable")

    def put(self, key: str, value: str) -> None:
        pass

    def delete(self, key: str) -> None:
        pass


class ReadOnlyStorage:
    """Storage that serves a fixed document and rejects writes."""

    def __init__(self, value: Optional[str] = None):
        self.value = value

    def get(self, key: str) -> Optional[str]:
        return self.value

    def put(self, key: str, value: str) -> None:
        raise OSError("storage is read-only")

    def delete(self, key: str) -> None:
        raise OSError("storage is read-only")


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Knows a fixed set of symbols; any other symbol raises ProviderError.
    Records every call.
    """

    is_synthetic = False

    FIXED_QUOTES = {
        "AAPL": (Decimal("185.50"), Decimal("1.25"), Decimal("0.68"), 52_000_000),
        "MSFT": (Decimal("378.25"), Decimal("1.45"), Decimal("0.38"), 21_000_000),
        "GOOGL": (Decimal("142.75"), Decimal("1.25"), Decimal("0.88"), 25_000_000),
        "TSLA": (Decimal("248.75"), Decimal("-1.35"), Decimal("-0.54"), 98_000_000),
    }

    def __init__(self, as_of: Optional[datetime] = None):
        self._as_of = as_of or eastern_datetime(2024, 6, 15, 16, 0, 0)
        self.quote_calls: list[str] = []
        self.news_calls = 0
        self.articles = [
            NewsArticle(
                headline="Chipmakers extend gains",
                source="Wire",
                url="https://example.com/chips",
                published_at=self._as_of,
                summary="Semiconductor stocks rose for a third session.",
                related_tickers=["NVDA", "AMD"],
            ),
            NewsArticle(
                headline="Treasury yields steady",
                source="Desk",
                url="https://example.com/yields",
                published_at=self._as_of - timedelta(hours=1),
                summary="Bond markets were quiet ahead of data.",
                related_tickers=[],
            ),
        ]

    def get_quote(self, symbol: str) -> Quote:
        self.quote_calls.append(symbol)
        if symbol not in self.FIXED_QUOTES:
            raise ProviderError("deterministic", f"unknown symbol {symbol}")
        price, change, change_percent, volume = self.FIXED_QUOTES[symbol]
        return Quote(
            symbol=symbol,
            name=f"{symbol} Corp",
            price=price,
            change=change,
            change_percent=change_percent,
            volume=volume,
            as_of=self._as_of,
        )

    def get_news(self, limit: int = 20) -> list[NewsArticle]:
        self.news_calls += 1
        return self.articles[:limit]


class FailingMarketProvider:
    """Market provider that always raises an exception."""

    def get_quote(self, symbol: str) -> Quote:
        raise ConnectionError("Network unavailable")

    def get_news(self, limit: int = 20) -> list[NewsArticle]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 15, 14, 30, 0)


@pytest.fixture
def deterministic_provider(fixed_now) -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider(as_of=fixed_now)


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


@pytest.fixture
def stub_provider() -> StubMarketDataProvider:
    """Provide the synthetic provider with a fixed seed."""
    return StubMarketDataProvider(seed=42)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(storage_repo) -> LedgerService:
    """Provide test LedgerService."""
    return LedgerService(storage=storage_repo, storage_key="trades")


@pytest.fixture
def portfolio_engine(ledger_service) -> PortfolioEngine:
    """Provide test PortfolioEngine."""
    return PortfolioEngine(ledger_service=ledger_service)


@pytest.fixture
def watchlist_service(storage_repo) -> WatchlistService:
    """Provide test WatchlistService with a short default list."""
    return WatchlistService(
        storage=storage_repo,
        storage_key="watchlist",
        default_symbols=["AAPL", "MSFT"],
    )


@pytest.fixture
def quote_cache(fake_clock) -> QuoteCache:
    """Provide a QuoteCache with a 5 minute window on the fake clock."""
    return QuoteCache(ttl_seconds=300, clock=fake_clock)


@pytest.fixture
def market_data_service(
    deterministic_provider,
    quote_cache,
    stub_provider,
    watchlist_service,
) -> MarketDataService:
    """Provide test MarketDataService with deterministic provider."""
    return MarketDataService(
        provider=deterministic_provider,
        cache=quote_cache,
        fallback=stub_provider,
        watchlist=watchlist_service,
        news_limit=20,
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def app_context(session_factory, deterministic_provider, fake_clock) -> AppContext:
    """Provide an initialized context on the test database."""
    context = AppContext(
        settings=Settings(default_watchlist=["AAPL", "MSFT"]),
        session_factory=session_factory,
        provider=deterministic_provider,
        clock=fake_clock,
    )
    context.initialize()
    set_app_context(context)
    yield context
    set_app_context(None)


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client bound to the test context."""
    with TestClient(app) as c:
        yield c


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.000001"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"


_trade_seq = [0]


def make_trade(
    symbol: str,
    side: TradeSide,
    quantity,
    price,
    trade_id: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> TradeRecord:
    """Build a TradeRecord directly, bypassing the ledger."""
    _trade_seq[0] += 1
    return TradeRecord(
        trade_id=trade_id or str(1_700_000_000_000 + _trade_seq[0]),
        symbol=symbol,
        side=side,
        quantity=Decimal(str(quantity)),
        price=Decimal(str(price)),
        timestamp=timestamp or eastern_datetime(2024, 6, 15),
    )


def buy(symbol: str, quantity, price, **kwargs) -> TradeRecord:
    return make_trade(symbol, TradeSide.BUY, quantity, price, **kwargs)


def sell(symbol: str, quantity, price, **kwargs) -> TradeRecord:
    return make_trade(symbol, TradeSide.SELL, quantity, price, **kwargs)
