"""
Live market data provider.

Quotes come from Yahoo Finance via yfinance; general news comes from the
Finnhub REST API. Every failure (network, timeout, missing fields) is
raised as ProviderError so the quote cache can substitute synthetic data.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

import requests

from tradedesk.core.exceptions import ProviderError
from tradedesk.core.timezone import now_eastern, parse_timestamp
from tradedesk.domain.views import Quote, NewsArticle
from tradedesk.providers.market_data_provider import company_name

logger = logging.getLogger(__name__)

FINNHUB_NEWS_URL = "https://finnhub.io/api/v1/news"
CENTS = Decimal("0.01")


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


class LiveMarketDataProvider:
    """Fetches quotes from yfinance and news from Finnhub."""

    is_synthetic = False

    def __init__(
        self,
        finnhub_api_key: str = "demo",
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self._finnhub_api_key = finnhub_api_key
        self._timeout = timeout_seconds
        self._session = session or requests.Session()

    def get_quote(self, symbol: str) -> Quote:
        """Fetch the latest quote for symbol from Yahoo Finance."""
        upper_symbol = symbol.strip().upper()
        logger.debug("Fetching yfinance quote for %s", upper_symbol)
        # Do not wait on shutdown: a hung request must not outlive the timeout
        ex = ThreadPoolExecutor(max_workers=1)
        try:
            fut = ex.submit(self._fetch_info, upper_symbol)
            info = fut.result(timeout=self._timeout)
        except FuturesTimeoutError as exc:
            raise ProviderError("yfinance", f"{upper_symbol}: timed out") from exc
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError("yfinance", f"{upper_symbol}: {exc}") from exc
        finally:
            ex.shutdown(wait=False)

        return self._parse_quote(upper_symbol, info)

    def get_news(self, limit: int = 20) -> list[NewsArticle]:
        """Fetch general market news from Finnhub."""
        try:
            response = self._session.get(
                FINNHUB_NEWS_URL,
                params={"category": "general", "token": self._finnhub_api_key},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ProviderError("finnhub", str(exc)) from exc

        if not isinstance(data, list) or not data:
            raise ProviderError("finnhub", "empty news response")

        return [self._parse_article(item) for item in data[:limit]]

    @staticmethod
    def _fetch_info(symbol: str) -> dict:
        yf = _get_yf()
        info = yf.Ticker(symbol).info
        if not isinstance(info, dict):
            raise ProviderError("yfinance", f"{symbol}: malformed info payload")
        return info

    @staticmethod
    def _parse_quote(symbol: str, info: dict) -> Quote:
        price = _to_decimal(info.get("currentPrice"))
        if price is None:
            price = _to_decimal(info.get("regularMarketPrice"))
        if price is None:
            raise ProviderError("yfinance", f"{symbol}: missing price")

        prev_close = _to_decimal(
            info.get("previousClose") or info.get("regularMarketPreviousClose")
        )
        if prev_close:
            change = price - prev_close
            change_percent = (change / prev_close * 100).quantize(CENTS)
        else:
            change = _to_decimal(info.get("regularMarketChange")) or Decimal("0")
            change_percent = _to_decimal(info.get("regularMarketChangePercent")) or Decimal("0")

        volume = info.get("regularMarketVolume") or info.get("volume") or 0
        name = (info.get("longName") or info.get("shortName") or "").strip()

        return Quote(
            symbol=symbol,
            name=name or company_name(symbol),
            price=price.quantize(CENTS),
            change=change.quantize(CENTS),
            change_percent=change_percent,
            volume=int(volume),
            as_of=now_eastern(),
        )

    @staticmethod
    def _parse_article(item: Any) -> NewsArticle:
        try:
            headline = item["headline"]
            published_at = parse_timestamp(item["datetime"])
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            raise ProviderError("finnhub", f"malformed article: {exc}") from exc

        related = item.get("related") or ""
        return NewsArticle(
            headline=headline,
            source=item.get("source") or "",
            url=item.get("url") or "#",
            published_at=published_at,
            summary=item.get("summary") or headline,
            related_tickers=[t.strip().upper() for t in related.split(",") if t.strip()],
        )
