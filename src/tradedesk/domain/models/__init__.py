"""Domain models package."""

from tradedesk.domain.models.enums import TradeSide
from tradedesk.domain.models.trade import TradeRecord
from tradedesk.domain.models.cache import CacheEntry

__all__ = [
    "TradeSide",
    "TradeRecord",
    "CacheEntry",
]
