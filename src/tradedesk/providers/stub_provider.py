"""Synthetic market data provider for offline use and as the fetch fallback."""

import random
from datetime import timedelta
from decimal import Decimal

from tradedesk.core.timezone import now_eastern
from tradedesk.domain.views import Quote, NewsArticle
from tradedesk.providers.market_data_provider import company_name

CENTS = Decimal("0.01")

# Fixed (last_price, prev_close) for common symbols
_STUB_PRICES: dict[str, tuple[Decimal, Decimal]] = {
    "AAPL": (Decimal("185.50"), Decimal("184.25")),
    "MSFT": (Decimal("378.25"), Decimal("376.80")),
    "GOOGL": (Decimal("142.75"), Decimal("141.50")),
    "AMZN": (Decimal("178.50"), Decimal("177.25")),
    "TSLA": (Decimal("248.75"), Decimal("250.10")),
    "NVDA": (Decimal("485.25"), Decimal("482.50")),
    "META": (Decimal("505.50"), Decimal("502.75")),
    "AMD": (Decimal("142.90"), Decimal("144.05")),
}

# (headline, source, summary, tickers, hours ago)
_STUB_NEWS: list[tuple[str, str, str, list[str], int]] = [
    (
        "Tech stocks rally as AI sector shows strong growth",
        "Market Watch",
        "Major tech companies see significant gains driven by AI innovations and investor optimism.",
        ["NVDA", "MSFT", "GOOGL"],
        0,
    ),
    (
        "Federal Reserve signals potential rate changes",
        "Financial Times",
        "Market analysts predict volatility as Fed considers monetary policy adjustments.",
        ["SPY"],
        1,
    ),
    (
        "Energy sector faces headwinds amid market uncertainty",
        "Reuters",
        "Oil prices fluctuate as global demand concerns weigh on energy stocks.",
        ["XOM", "CVX"],
        2,
    ),
    (
        "Electric vehicle sales surge in Q4 earnings reports",
        "Bloomberg",
        "EV manufacturers report record sales, boosting stock valuations across the sector.",
        ["TSLA"],
        3,
    ),
    (
        "Semiconductor shortage concerns resurface",
        "CNBC",
        "Supply chain issues could impact tech hardware production in coming quarters.",
        ["AMD", "INTC"],
        4,
    ),
]


class StubMarketDataProvider:
    """
    Provider with deterministic fake data.

    Known symbols use the fixed price table; any other symbol gets prices
    drawn from a generator seeded by (seed, symbol), so a symbol always
    maps to the same synthetic quote.
    """

    is_synthetic = True

    def __init__(self, seed: int = 42):
        self._seed = seed

    def get_quote(self, symbol: str) -> Quote:
        """Return a synthetic quote for symbol."""
        upper_symbol = symbol.upper()
        if upper_symbol in _STUB_PRICES:
            last_price, prev_close = _STUB_PRICES[upper_symbol]
            volume = 10_000_000 + sum(ord(c) for c in upper_symbol) * 10_000
        else:
            rng = random.Random(f"{self._seed}:{upper_symbol}")
            unit = rng.random()
            last_price = Decimal(str(unit * 500 + 100)).quantize(CENTS)
            prev_close = (last_price - Decimal(str((unit - 0.5) * 20))).quantize(CENTS)
            volume = int(unit * 50_000_000) + 1_000_000

        change = last_price - prev_close
        return Quote(
            symbol=upper_symbol,
            name=company_name(upper_symbol),
            price=last_price,
            change=change,
            change_percent=(change / prev_close * 100).quantize(CENTS),
            volume=volume,
            as_of=now_eastern(),
        )

    def get_quotes(self, symbols: list[str]) -> list[Quote]:
        return [self.get_quote(s) for s in symbols]

    def get_news(self, limit: int = 20) -> list[NewsArticle]:
        """Return the fixed synthetic news list."""
        now = now_eastern()
        return [
            NewsArticle(
                headline=headline,
                source=source,
                url="#",
                published_at=now - timedelta(hours=hours_ago),
                summary=summary,
                related_tickers=list(tickers),
            )
            for headline, source, summary, tickers, hours_ago in _STUB_NEWS
        ][:limit]
