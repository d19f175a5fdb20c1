# src/btcwatch/adapters/exchanges/base.py
"""
Base Exchange Adapter Interface

This module defines the abstract base class for exchange ticker backends.
An adapter knows two things about its exchange: how to build the ticker URL
for a currency, and how to parse the ticker document into a RateRecord.
Neither operation touches the network.

Files that USE this module:
- btcwatch.adapters.exchanges.mtgox (MtGoxExchange implements ExchangeAdapter)
- btcwatch.adapters.exchanges.btce (BtceExchange implements ExchangeAdapter)
- btcwatch.application.rates_service (RatesService uses ExchangeAdapter)
- tests.test_exchanges (unit tests)

Files that this module USES:
- btcwatch.domain (currency table, RateRecord, errors)
- btcwatch.shared.validators (validate_url_template)
"""
from __future__ import annotations

import json
import logging
import math
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from btcwatch.domain.currencies import CODE_LENGTH, lookup
from btcwatch.domain.errors import ConfigurationError, InvalidCurrencyError, MalformedResponseError
from btcwatch.domain.models import CurrencyInfo, RateRecord
from btcwatch.shared.validators import validate_url_template

log = logging.getLogger(__name__)

GENERIC_FAILURE = "couldn't get a successful JSON string"


class ExchangeAdapter(ABC):
    #: Registry key, also the value stored in CurrencyInfo.exchanges
    name: str = ""
    #: Human-readable exchange name for the version banner
    display_name: str = ""
    #: Offset of the 3-letter currency placeholder in the URL template
    placeholder_offset: int = 0

    def __init__(self, url_template: str):
        """
        Initialize the adapter with its ticker URL template.

        Args:
            url_template: Ticker URL with a currency code at ``placeholder_offset``

        Raises:
            ConfigurationError: If the template has no currency code at the expected offset
        """
        if not validate_url_template(url_template, self.placeholder_offset, CODE_LENGTH):
            raise ConfigurationError(
                f"{self.name} ticker URL must hold a currency code at offset "
                f"{self.placeholder_offset}: {url_template!r}"
            )
        self.url_template = url_template

    def format_code(self, code: str) -> str:
        """Spell a currency code the way the exchange expects it in URLs."""
        return code

    def supports(self, info: CurrencyInfo) -> bool:
        return self.name in info.exchanges

    def build_url(self, code: str) -> str:
        """
        Build the ticker URL for a currency.

        The template keeps its shape; only the placeholder range is replaced.

        Args:
            code: Uppercase 3-letter currency code

        Returns:
            Concrete ticker URL

        Raises:
            InvalidCurrencyError: If the code is malformed or not quoted by this exchange
        """
        if len(code) != CODE_LENGTH:
            raise InvalidCurrencyError(
                f"invalid currency: {code!r} - must be {CODE_LENGTH} characters long"
            )
        info = lookup(code)
        if not self.supports(info):
            raise InvalidCurrencyError(
                f"invalid currency: {code} is not supported by {self.display_name}"
            )
        start = self.placeholder_offset
        end = start + CODE_LENGTH
        url = self.url_template[:start] + self.format_code(code) + self.url_template[end:]
        log.debug("Built %s ticker URL: %s", self.name, url)
        return url

    @abstractmethod
    def parse(self, body: str, currency: CurrencyInfo) -> RateRecord:
        """
        Parse a ticker document.

        Returns:
            RateRecord; success is False when the exchange reported failure

        Raises:
            MalformedResponseError: If the body is not JSON or lacks expected fields
        """
        raise NotImplementedError

    # -------- helpers shared by concrete adapters --------

    def _load_json(self, body: str) -> Dict[str, Any]:
        try:
            data = json.loads(body)
        except (TypeError, ValueError) as e:
            log.error("%s returned invalid JSON: %s", self.display_name, e)
            raise MalformedResponseError(f"{self.display_name} returned invalid JSON: {e}") from e
        if not isinstance(data, dict):
            log.error("%s unexpected response type: %r", self.display_name, type(data))
            raise MalformedResponseError(f"{self.display_name} returned non-object JSON")
        return data

    def _positive_float(self, value: Any, what: str) -> float:
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"{self.display_name} {what} is not a number: {value!r}"
            ) from e
        if not math.isfinite(number) or number <= 0:
            raise MalformedResponseError(
                f"{self.display_name} returned non-positive {what}: {value!r}"
            )
        return number

    @staticmethod
    def _error_text(data: Dict[str, Any]) -> str:
        error: Optional[Any] = data.get("error")
        return str(error) if error else GENERIC_FAILURE

    def _scaled_int(self, value: Any, scale_factor: int, what: str) -> int:
        """Convert a decimal price into an integer count of 1/scale_factor units."""
        try:
            scaled = Decimal(str(value)) * scale_factor
        except InvalidOperation as e:
            raise MalformedResponseError(
                f"{self.display_name} {what} is not a number: {value!r}"
            ) from e
        return int(scaled.to_integral_value())
