"""Core utilities and shared functionality."""

from tradedesk.core.timezone import (
    now_eastern,
    to_eastern,
    parse_timestamp,
    EASTERN_TZ,
)
from tradedesk.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ProviderError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "parse_timestamp",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ProviderError",
]
