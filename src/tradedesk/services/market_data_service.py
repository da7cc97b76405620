"""Market data service for quotes and news."""

import logging
from typing import Optional

from tradedesk.core.exceptions import ProviderError
from tradedesk.core.timezone import now_eastern
from tradedesk.domain.views import Quote, NewsArticle, MarketDataResult
from tradedesk.providers.market_data_provider import MarketDataProvider
from tradedesk.providers.stub_provider import StubMarketDataProvider
from tradedesk.services.quote_cache import QuoteCache
from tradedesk.services.watchlist_service import WatchlistService

logger = logging.getLogger(__name__)


def _normalize_symbols(symbols: list[str]) -> list[str]:
    seen: list[str] = []
    for symbol in symbols:
        clean = (symbol or "").strip().upper()
        if clean and clean not in seen:
            seen.append(clean)
    return seen


class MarketDataService:
    """
    Service for fetching market data (quotes, news).

    Every fetch goes through the quote cache; provider failures are replaced
    by synthetic data, so callers always get a payload. Results report
    is_demo when any part of them is synthetic.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache: QuoteCache,
        fallback: Optional[StubMarketDataProvider] = None,
        watchlist: Optional[WatchlistService] = None,
        news_limit: int = 20,
    ):
        self._provider = provider
        self._cache = cache
        self._fallback = fallback or StubMarketDataProvider()
        self._watchlist = watchlist
        self._news_limit = news_limit
        self._provider_is_synthetic = getattr(provider, "is_synthetic", False)

    def get_quotes(self, symbols: list[str]) -> MarketDataResult[Quote]:
        """
        Fetch quotes for a symbol set.

        Each distinct symbol set has its own cache entry. A symbol whose
        fetch fails is replaced by a synthetic quote.
        """
        symbols = _normalize_symbols(symbols)
        if not symbols:
            return MarketDataResult(fetched_at=now_eastern())

        return self._cache.fetch_with_fallback(
            f"stocks_{'_'.join(symbols)}",
            lambda: self._fetch_quotes(symbols),
            lambda: self._synthetic_quotes(symbols),
        )

    def get_watchlist_quotes(self) -> MarketDataResult[Quote]:
        """Fetch quotes for the current watchlist."""
        if self._watchlist is None:
            return MarketDataResult(fetched_at=now_eastern())
        return self.get_quotes(self._watchlist.symbols())

    def get_quote(self, symbol: str) -> MarketDataResult[Quote]:
        """Fetch a single quote (result holds exactly one item)."""
        clean = (symbol or "").strip().upper()
        return self._cache.fetch_with_fallback(
            f"quote_{clean}",
            lambda: self._fetch_quotes([clean]),
            lambda: self._synthetic_quotes([clean]),
        )

    def get_news(self, limit: Optional[int] = None) -> MarketDataResult[NewsArticle]:
        """Fetch general market news, falling back to synthetic headlines."""
        limit = limit or self._news_limit
        return self._cache.fetch_with_fallback(
            f"market_news_{limit}",
            lambda: self._fetch_news(limit),
            lambda: MarketDataResult(
                items=self._fallback.get_news(limit),
                is_demo=True,
                fetched_at=now_eastern(),
            ),
        )

    def _fetch_quotes(self, symbols: list[str]) -> MarketDataResult[Quote]:
        quotes: list[Quote] = []
        is_demo = self._provider_is_synthetic
        for symbol in symbols:
            try:
                quotes.append(self._provider.get_quote(symbol))
            except Exception as exc:
                logger.warning("Quote fetch failed for %s, using demo data: %s", symbol, exc)
                quotes.append(self._fallback.get_quote(symbol))
                is_demo = True
        return MarketDataResult(items=quotes, is_demo=is_demo, fetched_at=now_eastern())

    def _synthetic_quotes(self, symbols: list[str]) -> MarketDataResult[Quote]:
        return MarketDataResult(
            items=self._fallback.get_quotes(symbols),
            is_demo=True,
            fetched_at=now_eastern(),
        )

    def _fetch_news(self, limit: int) -> MarketDataResult[NewsArticle]:
        articles = self._provider.get_news(limit)
        if not articles:
            raise ProviderError("news", "no articles returned")
        return MarketDataResult(
            items=articles[:limit],
            is_demo=self._provider_is_synthetic,
            fetched_at=now_eastern(),
        )
