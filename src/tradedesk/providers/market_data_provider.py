"""Market data provider protocol and shared lookups."""

from typing import Protocol

from tradedesk.domain.views import Quote, NewsArticle

_COMPANY_NAMES: dict[str, str] = {
    "AAPL": "Apple Inc.",
    "MSFT": "Microsoft Corporation",
    "GOOGL": "Alphabet Inc.",
    "AMZN": "Amazon.com Inc.",
    "TSLA": "Tesla Inc.",
    "NVDA": "NVIDIA Corporation",
    "META": "Meta Platforms Inc.",
    "AMD": "Advanced Micro Devices Inc.",
}


def company_name(symbol: str) -> str:
    """Return the display name for well-known tickers, else the ticker itself."""
    return _COMPANY_NAMES.get(symbol.upper(), symbol.upper())


class MarketDataProvider(Protocol):
    """
    Protocol for market data providers.

    Implementations either return well-formed data or raise; callers
    (the quote cache) own the fallback.
    """

    def get_quote(self, symbol: str) -> Quote:
        """Fetch the latest quote for one symbol."""
        ...

    def get_news(self, limit: int = 20) -> list[NewsArticle]:
        """Fetch general market news, newest first."""
        ...
