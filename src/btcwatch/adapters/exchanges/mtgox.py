# src/btcwatch/adapters/exchanges/mtgox.py
"""
MtGox Ticker Adapter

Builds ``ticker_fast`` URLs of the form
``https://data.mtgox.com/api/2/BTC<CUR>/money/ticker_fast`` and parses the
ticker document::

    {"result": "success",
     "data": {"buy":  {"value": "5000.00", "value_int": "500000", "currency": "USD", ...},
              "sell": {"value": "4950.00", "value_int": "495000", "currency": "USD", ...}}}

``value_int`` is the canonical price in currency subunits; ``value`` is the
decimal form used for reverse conversions.

Files that USE this module:
- btcwatch.adapters.exchanges (build_exchange registry)
- tests.test_exchanges (unit tests)

Files that this module USES:
- btcwatch.adapters.exchanges.base (ExchangeAdapter)
- btcwatch.domain (RateRecord, CurrencyInfo, MalformedResponseError)
"""
import logging
from typing import Any, Dict, Tuple

from btcwatch.adapters.exchanges.base import ExchangeAdapter
from btcwatch.domain.currencies import MTGOX
from btcwatch.domain.errors import MalformedResponseError
from btcwatch.domain.models import CurrencyInfo, RateRecord

log = logging.getLogger(__name__)


class MtGoxExchange(ExchangeAdapter):
    name = MTGOX
    display_name = "MtGox"
    placeholder_offset = 32

    def parse(self, body: str, currency: CurrencyInfo) -> RateRecord:
        data = self._load_json(body)

        if "result" not in data:
            log.error("MtGox response missing 'result' field")
            raise MalformedResponseError("MtGox response missing 'result' field")

        if data["result"] != "success":
            message = self._error_text(data)
            log.warning("MtGox reported failure: %s", message)
            return RateRecord.failure(message)

        payload = data.get("data")
        if not isinstance(payload, dict):
            log.error("MtGox response missing 'data' object")
            raise MalformedResponseError("MtGox response missing 'data' object")

        buy, buy_float = self._price(payload, "buy", currency)
        sell, sell_float = self._price(payload, "sell", currency)

        log.info("MtGox %s: buy=%s sell=%s", currency.code, buy, sell)
        return RateRecord(
            success=True,
            buy=buy,
            sell=sell,
            buy_float=buy_float,
            sell_float=sell_float,
        )

    def _price(self, payload: Dict[str, Any], key: str, currency: CurrencyInfo) -> Tuple[int, float]:
        """
        Extract one price object.

        Returns:
            (value_int, value) as (int, float)

        Raises:
            MalformedResponseError: If the object or either field is missing or invalid
        """
        entry = payload.get(key)
        if not isinstance(entry, dict) or "value_int" not in entry or "value" not in entry:
            log.error("MtGox response missing data.%s.value_int/value", key)
            raise MalformedResponseError(f"MtGox response missing 'data.{key}' price")

        quoted = entry.get("currency")
        if quoted is not None and quoted != currency.code:
            raise MalformedResponseError(
                f"MtGox quoted {key} in {quoted}, expected {currency.code}"
            )

        raw_int = entry["value_int"]
        try:
            # value_int arrives as a string of digits; bool and float are not integers here
            if isinstance(raw_int, (bool, float)):
                raise ValueError(raw_int)
            price_int = int(str(raw_int).strip())
        except ValueError as e:
            raise MalformedResponseError(
                f"MtGox {key} value_int is not an integer: {raw_int!r}"
            ) from e
        if price_int <= 0:
            raise MalformedResponseError(f"MtGox returned non-positive {key}: {raw_int!r}")

        return price_int, self._positive_float(entry["value"], key)
