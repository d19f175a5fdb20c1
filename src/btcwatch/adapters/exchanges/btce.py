# src/btcwatch/adapters/exchanges/btce.py
"""
BTC-E Ticker Adapter

Builds URLs of the form ``https://btc-e.com/api/2/btc_<cur>/ticker`` (lower
case pair) and parses::

    {"ticker": {"buy": 5000.0, "sell": 4950.0, "last": ..., "server_time": ...}}

Failures come back as ``{"success": 0, "error": "invalid pair"}``. BTC-E only
quotes decimal prices, often with sub-cent digits, so the integer price is
derived from them with exact decimal arithmetic at a resolution of 1e-8.

Files that USE this module:
- btcwatch.adapters.exchanges (build_exchange registry)
- tests.test_exchanges (unit tests)

Files that this module USES:
- btcwatch.adapters.exchanges.base (ExchangeAdapter)
- btcwatch.domain (RateRecord, CurrencyInfo, MalformedResponseError)
"""
import logging

from btcwatch.adapters.exchanges.base import ExchangeAdapter
from btcwatch.domain.currencies import BTCE
from btcwatch.domain.errors import MalformedResponseError
from btcwatch.domain.models import CurrencyInfo, RateRecord

log = logging.getLogger(__name__)

# BTC-E quotes more decimals than currency subunits; keep 8 places in the integer price
PRICE_SCALE = 10 ** 8


class BtceExchange(ExchangeAdapter):
    name = BTCE
    display_name = "BTC-E"
    placeholder_offset = 28

    def format_code(self, code: str) -> str:
        return code.lower()

    def parse(self, body: str, currency: CurrencyInfo) -> RateRecord:
        data = self._load_json(body)

        ticker = data.get("ticker")
        if ticker is None:
            if "success" in data and not data["success"]:
                message = self._error_text(data)
                log.warning("BTC-E reported failure: %s", message)
                return RateRecord.failure(message)
            log.error("BTC-E response missing 'ticker' field")
            raise MalformedResponseError("BTC-E response missing 'ticker' field")

        if not isinstance(ticker, dict) or "buy" not in ticker or "sell" not in ticker:
            log.error("BTC-E response missing ticker.buy/ticker.sell")
            raise MalformedResponseError("BTC-E response missing 'ticker.buy' or 'ticker.sell'")

        buy_float = self._positive_float(ticker["buy"], "buy")
        sell_float = self._positive_float(ticker["sell"], "sell")

        log.info("BTC-E %s: buy=%s sell=%s", currency.code, buy_float, sell_float)
        return RateRecord(
            success=True,
            buy=self._scaled_int(ticker["buy"], PRICE_SCALE, "buy"),
            sell=self._scaled_int(ticker["sell"], PRICE_SCALE, "sell"),
            buy_float=buy_float,
            sell_float=sell_float,
            price_scale=PRICE_SCALE,
        )
