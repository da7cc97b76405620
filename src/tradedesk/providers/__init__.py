"""Market data providers module."""

from tradedesk.providers.market_data_provider import MarketDataProvider, company_name
from tradedesk.providers.stub_provider import StubMarketDataProvider
from tradedesk.providers.live_provider import LiveMarketDataProvider

__all__ = [
    "MarketDataProvider",
    "company_name",
    "StubMarketDataProvider",
    "LiveMarketDataProvider",
]
