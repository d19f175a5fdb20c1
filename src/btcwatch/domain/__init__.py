# src/btcwatch/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models, the currency table and the error
taxonomy. No dependencies on infrastructure or external systems.
"""

from btcwatch.domain.models import (
    ALL_FIELDS,
    CurrencyInfo,
    OutputField,
    RateRecord,
    RequestContext,
)
from btcwatch.domain.errors import (
    BtcwatchError,
    ConfigurationError,
    InvalidCurrencyError,
    MalformedResponseError,
    NetworkError,
    UnknownTopicError,
    UpstreamFailureError,
)
from btcwatch.domain.currencies import BITCOIN, CURRENCIES, lookup, normalize_code, supported_currencies

__all__ = [
    "ALL_FIELDS",
    "CurrencyInfo",
    "OutputField",
    "RateRecord",
    "RequestContext",
    "BtcwatchError",
    "ConfigurationError",
    "InvalidCurrencyError",
    "MalformedResponseError",
    "NetworkError",
    "UnknownTopicError",
    "UpstreamFailureError",
    "BITCOIN",
    "CURRENCIES",
    "lookup",
    "normalize_code",
    "supported_currencies",
]
