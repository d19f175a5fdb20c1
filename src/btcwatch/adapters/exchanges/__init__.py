# src/btcwatch/adapters/exchanges/__init__.py
"""
Exchange Adapters - Ticker URL Builders and Parsers

This package contains one adapter per supported exchange. All adapters
implement the ExchangeAdapter interface; the backend is chosen at
configuration time with build_exchange().
"""
from typing import Dict, Optional, Type

from btcwatch.adapters.exchanges.base import ExchangeAdapter
from btcwatch.adapters.exchanges.btce import BtceExchange
from btcwatch.adapters.exchanges.mtgox import MtGoxExchange
from btcwatch.config import settings
from btcwatch.domain.errors import ConfigurationError

EXCHANGE_CLASSES: Dict[str, Type[ExchangeAdapter]] = {
    MtGoxExchange.name: MtGoxExchange,
    BtceExchange.name: BtceExchange,
}


def build_exchange(name: str, url_template: Optional[str] = None) -> ExchangeAdapter:
    """
    Create the adapter for an exchange.

    Args:
        name: Exchange key ("mtgox" or "btce")
        url_template: Optional custom ticker URL (defaults to the configured one)

    Raises:
        ConfigurationError: If the exchange is unknown or its URL template is invalid
    """
    try:
        cls = EXCHANGE_CLASSES[name]
    except KeyError:
        raise ConfigurationError(f"unknown exchange: {name!r}") from None
    if url_template is None:
        url_template = getattr(settings, f"{name}_url")
    return cls(url_template)


__all__ = [
    "ExchangeAdapter",
    "MtGoxExchange",
    "BtceExchange",
    "EXCHANGE_CLASSES",
    "build_exchange",
]
