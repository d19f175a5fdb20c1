# src/btcwatch/application/rates_service.py
"""
Rates Service - Validate, Fetch and Parse Ticker Rates

This module contains the retrieval half of the pipeline: it validates the
requested currency, builds the ticker URL, performs the single fetch and
parses the document. The parsed record is memoized, so however many fields an
invocation prints, the exchange is contacted once.

Files that USE this module:
- btcwatch.app (RatesService for one-shot output)
- btcwatch.application.monitor (Monitor refreshes through RatesService)
- tests.test_rates_service (unit tests)

Files that this module USES:
- btcwatch.adapters.exchanges.base (ExchangeAdapter for build_url/parse)
- btcwatch.adapters.http.fetcher (fetch, the default transport)
- btcwatch.domain (RateRecord, currency table)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from typing import Callable, Optional  # Type hints for callables and optional values

from btcwatch.adapters.exchanges.base import ExchangeAdapter  # Exchange URL builder and parser
from btcwatch.adapters.http.fetcher import fetch  # Single HTTP GET of the ticker
from btcwatch.domain.currencies import lookup  # Currency table lookup
from btcwatch.domain.models import RateRecord  # Parsed ticker rates

log = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


class RatesService:
    """
    Fetches rates for one currency at most once until reset() is called.
    """
    def __init__(self, exchange: ExchangeAdapter, fetcher: Fetcher = fetch):
        """
        Initialize rates service.

        Args:
            exchange: Adapter for the configured exchange
            fetcher: Callable returning the body for a URL (defaults to HTTP fetch)
        """
        self.exchange = exchange
        self.fetcher = fetcher
        self._record: Optional[RateRecord] = None
        self._currency: Optional[str] = None

    @property
    def fetched(self) -> bool:
        """Whether a record is currently memoized."""
        return self._record is not None

    def rates(self, currency: str) -> RateRecord:
        """
        Get the rate record for a currency, fetching it on first use.

        The currency is validated before any network access.

        Args:
            currency: Uppercase 3-letter currency code

        Returns:
            Parsed RateRecord (may report success=False)

        Raises:
            InvalidCurrencyError: If the currency is not quoted by the exchange
            NetworkError: If the fetch fails
            MalformedResponseError: If the body cannot be parsed
        """
        if self._record is not None and self._currency == currency:
            log.debug("Using already fetched %s rates", currency)
            return self._record

        url = self.exchange.build_url(currency)
        info = lookup(currency)
        body = self.fetcher(url)
        record = self.exchange.parse(body, info)

        self._record = record
        self._currency = currency
        return record

    def reset(self) -> None:
        """Forget the memoized record so the next call fetches again."""
        self._record = None
        self._currency = None
