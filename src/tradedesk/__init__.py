"""Trade Desk: local trade journal with position accounting and cached market data."""

__version__ = "0.1.0"
