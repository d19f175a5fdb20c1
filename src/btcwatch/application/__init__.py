# src/btcwatch/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct network I/O - the transport is injected through RatesService.
"""

from btcwatch.application.rates_service import RatesService
from btcwatch.application.monitor import Monitor

__all__ = [
    "RatesService",
    "Monitor",
]
