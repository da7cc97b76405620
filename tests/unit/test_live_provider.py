"""
Unit tests for LiveMarketDataProvider with yfinance and HTTP mocked out.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import requests

from tradedesk.core.exceptions import ProviderError
from tradedesk.providers.live_provider import LiveMarketDataProvider, FINNHUB_NEWS_URL


def _patch_yfinance(monkeypatch, info):
    yf = MagicMock()
    yf.Ticker.return_value.info = info
    monkeypatch.setattr("tradedesk.providers.live_provider._get_yf", lambda: yf)
    return yf


def _session_returning(payload):
    session = MagicMock()
    session.get.return_value.json.return_value = payload
    return session


class TestLiveQuotes:
    """Tests for quote parsing."""

    def test_quote_from_info(self, monkeypatch):
        """
        GIVEN a yfinance info payload with price and previous close
        WHEN fetching a quote
        THEN change and change percent are derived from them
        """
        yf = _patch_yfinance(monkeypatch, {
            "currentPrice": 110,
            "previousClose": 100,
            "regularMarketVolume": 1234,
            "longName": "Example Corp",
        })

        quote = LiveMarketDataProvider(timeout_seconds=5).get_quote("exmp")

        yf.Ticker.assert_called_once_with("EXMP")
        assert quote.symbol == "EXMP"
        assert quote.name == "Example Corp"
        assert quote.price == Decimal("110.00")
        assert quote.change == Decimal("10.00")
        assert quote.change_percent == Decimal("10.00")
        assert quote.volume == 1234

    def test_regular_market_price_and_known_name(self, monkeypatch):
        _patch_yfinance(monkeypatch, {"regularMarketPrice": "185.5"})

        quote = LiveMarketDataProvider().get_quote("AAPL")

        assert quote.price == Decimal("185.50")
        assert quote.name == "Apple Inc."
        assert quote.change == Decimal("0.00")

    def test_missing_price_raises(self, monkeypatch):
        _patch_yfinance(monkeypatch, {"longName": "No Price"})

        with pytest.raises(ProviderError):
            LiveMarketDataProvider().get_quote("NOPE")

    def test_yfinance_error_is_wrapped(self, monkeypatch):
        yf = MagicMock()
        yf.Ticker.side_effect = RuntimeError("rate limited")
        monkeypatch.setattr("tradedesk.providers.live_provider._get_yf", lambda: yf)

        with pytest.raises(ProviderError) as exc_info:
            LiveMarketDataProvider().get_quote("AAPL")

        assert exc_info.value.provider == "yfinance"


class TestLiveNews:
    """Tests for Finnhub news parsing."""

    def test_news_parsed(self):
        session = _session_returning([
            {
                "headline": "Stocks rise",
                "source": "Wire",
                "url": "https://example.com/a",
                "datetime": 1718460000,
                "summary": "Indexes closed higher.",
                "related": "aapl, msft",
            },
            {"headline": "Quiet day", "datetime": 1718456400},
        ])
        provider = LiveMarketDataProvider(finnhub_api_key="key", session=session)

        articles = provider.get_news(limit=10)

        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args[0] == FINNHUB_NEWS_URL
        assert kwargs["params"] == {"category": "general", "token": "key"}
        assert articles[0].related_tickers == ["AAPL", "MSFT"]
        assert articles[0].published_at.year == 2024
        assert articles[1].url == "#"
        assert articles[1].summary == "Quiet day"

    def test_news_respects_limit(self):
        items = [{"headline": f"H{i}", "datetime": 1718460000} for i in range(5)]
        provider = LiveMarketDataProvider(session=_session_returning(items))

        assert len(provider.get_news(limit=2)) == 2

    @pytest.mark.parametrize("payload", [[], {"error": "bad token"}])
    def test_empty_or_unexpected_response_raises(self, payload):
        provider = LiveMarketDataProvider(session=_session_returning(payload))

        with pytest.raises(ProviderError):
            provider.get_news()

    def test_http_error_is_wrapped(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("offline")
        provider = LiveMarketDataProvider(session=session)

        with pytest.raises(ProviderError) as exc_info:
            provider.get_news()

        assert exc_info.value.provider == "finnhub"

    def test_malformed_article_raises(self):
        provider = LiveMarketDataProvider(session=_session_returning([{"source": "Wire"}]))

        with pytest.raises(ProviderError):
            provider.get_news()
