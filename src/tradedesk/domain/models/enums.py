"""Enumerations for domain models."""

from enum import Enum


class TradeSide(str, Enum):
    """Side of a ledger trade."""

    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def parse(cls, value: "str | TradeSide") -> "TradeSide":
        """Parse a side case-insensitively ("buy", "SELL", ...)."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())
