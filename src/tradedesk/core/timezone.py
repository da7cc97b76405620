"""Timezone utilities for US/Eastern market time."""

from datetime import datetime
from typing import Union

import pytz
from dateutil import parser as date_parser

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def to_eastern(dt: datetime) -> datetime:
    """Convert a datetime to US/Eastern timezone."""
    if dt.tzinfo is None:
        # Naive values are assumed to already be Eastern
        return EASTERN_TZ.localize(dt)
    return dt.astimezone(EASTERN_TZ)


def parse_timestamp(value: Union[str, int, float, datetime]) -> datetime:
    """
    Parse a stored timestamp into an Eastern-aware datetime.

    Accepts ISO-8601 strings (with or without offset), epoch seconds or
    epoch milliseconds, and datetimes.
    """
    if isinstance(value, datetime):
        return to_eastern(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = value / 1000 if value > 1e11 else value
        return datetime.fromtimestamp(seconds, tz=pytz.utc).astimezone(EASTERN_TZ)
    return to_eastern(date_parser.parse(value))
