# src/btcwatch/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains the value objects passed through one request/response
cycle:
- Currency metadata (CurrencyInfo)
- Parsed ticker rates (RateRecord)
- Per-invocation presentation options (RequestContext)

Files that USE this module:
- btcwatch.domain.currencies (builds the CurrencyInfo table)
- btcwatch.adapters.exchanges.* (produce RateRecord)
- btcwatch.adapters.formatting.formatter (renders RateRecord for a RequestContext)
- btcwatch.application.* (services pass these objects around)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import math  # Finite checks for parsed prices
from dataclasses import dataclass, field  # Decorators for creating data classes
from enum import Enum  # Enumeration of printable fields
from typing import FrozenSet, Optional  # Type hints for sets and optional values


class OutputField(str, Enum):
    """A printable field; members are declared in print order."""
    RESULT = "result"
    BUY = "buy"
    SELL = "sell"


ALL_FIELDS: FrozenSet[OutputField] = frozenset(OutputField)


@dataclass(frozen=True)
class CurrencyInfo:
    """
    Static metadata for one quote currency.

    Attributes:
        code: 3-letter uppercase identifier (unique key)
        sign: Display symbol, may be multi-byte (e.g. "€")
        name: Human-readable currency name
        scale_factor: Subunits per whole unit; integer prices divide by this
        exchanges: Names of the exchange adapters that quote this currency
    """
    code: str
    sign: str
    name: str
    scale_factor: int
    exchanges: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class RateRecord:
    """
    Buy/sell rates parsed from one ticker document.

    Attributes:
        success: False when the exchange reported failure
        buy: Buy price per 1 BTC as an integer count of 1/price_scale currency units
        sell: Sell price per 1 BTC, same fixed-point form as buy
        buy_float: Buy price per 1 BTC (NOT its reciprocal) as supplied by the
            exchange's decimal field; reverse conversion divides the amount by it
        sell_float: Sell price per 1 BTC, same form as buy_float
        error_message: Exchange error text, only set when success is False
        price_scale: Divisor turning buy/sell into whole currency units; None means
            the currency's own scale_factor (its smallest subunit)
    """
    success: bool
    buy: Optional[int] = None
    sell: Optional[int] = None
    buy_float: Optional[float] = None
    sell_float: Optional[float] = None
    error_message: Optional[str] = None
    price_scale: Optional[int] = None

    def __post_init__(self) -> None:
        if self.success:
            prices = (self.buy, self.sell, self.buy_float, self.sell_float)
            if any(p is None or not math.isfinite(p) for p in prices):
                raise ValueError("successful RateRecord needs finite buy/sell values")
            if self.error_message is not None:
                raise ValueError("successful RateRecord cannot carry an error message")
        if self.price_scale is not None and self.price_scale <= 0:
            raise ValueError("price_scale must be positive")

    @classmethod
    def failure(cls, message: str) -> "RateRecord":
        """Build a record for a document in which the exchange reported failure."""
        return cls(success=False, error_message=message)


@dataclass(frozen=True)
class RequestContext:
    """
    Resolved options for one invocation.

    Attributes:
        currency: Validated 3-letter code
        amount: Quantity to convert (BTC forward, currency in reverse)
        reverse: Convert currency to Bitcoin instead of Bitcoin to currency
        verbose: Labelled output instead of bare numbers
        colour: Highlight the "success" literal in green
        fields: Which of result/buy/sell to print
    """
    currency: str = "USD"
    amount: float = 1.0
    reverse: bool = False
    verbose: bool = False
    colour: bool = False
    fields: FrozenSet[OutputField] = field(default_factory=lambda: ALL_FIELDS)

