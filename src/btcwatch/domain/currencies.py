# src/btcwatch/domain/currencies.py
"""
Currency Table - The Single Source of Supported Currencies

Every piece of btcwatch that needs to know about currencies (argument
validation, URL building, help listings, output formatting) reads this table.

Files that USE this module:
- btcwatch.adapters.exchanges.base (validates codes before building URLs)
- btcwatch.adapters.formatting.formatter (signs, scale factors, help listing)
- btcwatch.adapters.cli.parser (normalizes --currency)
- btcwatch.config.settings (validates the default currency)
- tests.test_currencies (unit tests)

Files that this module USES:
- btcwatch.domain.models (CurrencyInfo)
- btcwatch.domain.errors (InvalidCurrencyError)
"""
from __future__ import annotations

from typing import Dict, List

from btcwatch.domain.errors import InvalidCurrencyError
from btcwatch.domain.models import CurrencyInfo

CODE_LENGTH = 3

MTGOX = "mtgox"
BTCE = "btce"

_MTGOX_ONLY = frozenset({MTGOX})
_BOTH = frozenset({MTGOX, BTCE})

CURRENCIES: Dict[str, CurrencyInfo] = {
    info.code: info
    for info in (
        CurrencyInfo("AUD", "A$", "Australian Dollar", 100, _MTGOX_ONLY),
        CurrencyInfo("CAD", "C$", "Canadian Dollar", 100, _MTGOX_ONLY),
        CurrencyInfo("CHF", "Fr.", "Swiss Franc", 100, _MTGOX_ONLY),
        CurrencyInfo("CNY", "¥", "Chinese Yuan", 100, _MTGOX_ONLY),
        CurrencyInfo("CZK", "Kč", "Czech Koruna", 100, _MTGOX_ONLY),
        CurrencyInfo("DKK", "kr", "Danish Krone", 100, _MTGOX_ONLY),
        CurrencyInfo("EUR", "€", "Euro", 100, _BOTH),
        CurrencyInfo("GBP", "£", "Pound Sterling", 100, _MTGOX_ONLY),
        CurrencyInfo("HKD", "HK$", "Hong Kong Dollar", 100, _MTGOX_ONLY),
        CurrencyInfo("JPY", "¥", "Japanese Yen", 1, _MTGOX_ONLY),
        CurrencyInfo("NOK", "kr", "Norwegian Krone", 100, _MTGOX_ONLY),
        CurrencyInfo("PLN", "zł", "Polish Złoty", 100, _MTGOX_ONLY),
        CurrencyInfo("RUB", "₽", "Russian Ruble", 100, _MTGOX_ONLY),
        # BTC-E quotes the ruble under its pre-1998 code
        CurrencyInfo("RUR", "₽", "Russian Ruble", 100, frozenset({BTCE})),
        CurrencyInfo("SEK", "kr", "Swedish Krona", 100, _MTGOX_ONLY),
        CurrencyInfo("SGD", "S$", "Singapore Dollar", 100, _MTGOX_ONLY),
        CurrencyInfo("THB", "฿", "Thai Baht", 100, _MTGOX_ONLY),
        CurrencyInfo("USD", "$", "US Dollar", 100, _BOTH),
    )
}

# Unit used for reverse conversions; not a quote currency, so not in CURRENCIES
BITCOIN = CurrencyInfo("BTC", "₿", "Bitcoin", 100_000_000)


def lookup(code: str) -> CurrencyInfo:
    """
    Find a currency by its exact uppercase code.

    Args:
        code: 3-letter code, already normalized to uppercase

    Returns:
        CurrencyInfo for the code

    Raises:
        InvalidCurrencyError: If the code is not in the table
    """
    try:
        return CURRENCIES[code]
    except KeyError:
        raise InvalidCurrencyError(f"invalid currency: {code!r} is not a supported currency") from None


def normalize_code(raw: str) -> str:
    """
    Turn user input into a lookup key by uppercasing it.

    The length is checked on the input as given; surrounding whitespace counts.

    Raises:
        InvalidCurrencyError: If the input is not exactly three characters long
    """
    raw = raw or ""
    if len(raw) != CODE_LENGTH:
        raise InvalidCurrencyError(
            f"invalid currency: {raw!r} - must be {CODE_LENGTH} characters long"
        )
    return raw.upper()


def supported_currencies(exchange: str) -> List[CurrencyInfo]:
    """Return the currencies quoted by an exchange, ordered by code."""
    return [info for code, info in sorted(CURRENCIES.items()) if exchange in info.exchanges]

