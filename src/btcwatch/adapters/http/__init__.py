# src/btcwatch/adapters/http/__init__.py
"""
HTTP Adapter - Ticker Fetching

Wraps requests for the single GET each invocation performs.
"""

from btcwatch.adapters.http.fetcher import fetch

__all__ = ["fetch"]
