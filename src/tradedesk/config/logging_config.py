"""Logging configuration."""

import logging
import sys
from typing import Optional

from tradedesk.config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are chatty at INFO (HTTP retries, yfinance's
# sqlite tz cache, SQL echo)
QUIET_LOGGERS = ("sqlalchemy.engine", "urllib3", "yfinance", "peewee", "httpx")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging.

    The tradedesk package logs at the configured level (settings.log_level
    unless overridden); quote fetch fallbacks and oversell clamps are logged
    at WARNING so they show up at the default level.
    """
    settings = get_settings()
    app_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    logging.basicConfig(
        level=app_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("tradedesk").setLevel(app_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(app_level, logging.WARNING))
    logging.getLogger("uvicorn").setLevel(logging.INFO)
