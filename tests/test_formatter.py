# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Conversion and Output Lines

This module tests forward and reverse conversion, verbose and script
output, colour highlighting and the upstream-failure path.

Files that this module USES:
- btcwatch.adapters.formatting.formatter (render, convert, currency_lines)
- btcwatch.domain.models (RateRecord, RequestContext for test data)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from colorama import Fore, Style  # Expected colour codes

from btcwatch.adapters.formatting.formatter import convert, currency_lines, render
from btcwatch.domain.errors import UpstreamFailureError
from btcwatch.domain.models import OutputField, RateRecord, RequestContext

BUY = frozenset({OutputField.BUY})
SELL = frozenset({OutputField.SELL})
RESULT = frozenset({OutputField.RESULT})


@pytest.fixture
def record():
    return RateRecord(success=True, buy=500000, sell=495000, buy_float=5000.0, sell_float=4950.0)


class TestForward:
    def test_buy_plain(self, record):
        assert render(record, RequestContext(currency="USD", fields=BUY)) == ["5000.000000\n"]

    def test_sell_plain(self, record):
        assert render(record, RequestContext(currency="USD", fields=SELL)) == ["4950.000000\n"]

    def test_amount(self, record):
        ctx = RequestContext(currency="USD", amount=2.5, fields=BUY)
        assert render(record, ctx) == ["12500.000000\n"]

    def test_scale_factor_of_one(self, record):
        jpy = RateRecord(success=True, buy=650000, sell=640000, buy_float=650000.0, sell_float=640000.0)
        assert render(jpy, RequestContext(currency="JPY", fields=BUY)) == ["650000.000000\n"]

    def test_record_price_scale_overrides_currency_scale(self):
        fine = RateRecord(
            success=True, buy=500012345000, sell=495000000000,
            buy_float=5000.12345, sell_float=4950.0, price_scale=10 ** 8,
        )
        ctx = RequestContext(currency="USD", amount=1000, fields=BUY)
        assert render(fine, ctx) == ["5000123.450000\n"]

    def test_verbose_uses_currency_sign_and_code(self, record):
        ctx = RequestContext(currency="EUR", verbose=True, fields=BUY | SELL)
        assert render(record, ctx) == [
            "buy: € 5000.000000 EUR\n",
            "sell: € 4950.000000 EUR\n",
        ]


class TestReverse:
    def test_amount_over_float_price(self, record):
        value, unit = convert(record, OutputField.BUY, RequestContext(amount=100, reverse=True))
        assert value == pytest.approx(100 / 5000.0)
        assert unit.code == "BTC"

    def test_plain(self, record):
        ctx = RequestContext(amount=100, reverse=True, fields=SELL)
        assert render(record, ctx) == [f"{100 / 4950.0:f}\n"]

    def test_verbose_labels_bitcoin(self, record):
        ctx = RequestContext(currency="USD", amount=100, reverse=True, verbose=True, fields=BUY)
        assert render(record, ctx) == ["buy: ₿ 0.020000 BTC\n"]

    def test_result_has_no_price(self, record):
        with pytest.raises(ValueError):
            convert(record, OutputField.RESULT, RequestContext())


class TestResultField:
    def test_plain(self, record):
        assert render(record, RequestContext(fields=RESULT)) == ["success\n"]

    def test_verbose(self, record):
        assert render(record, RequestContext(verbose=True, fields=RESULT)) == ["result: success\n"]

    def test_colour(self, record):
        lines = render(record, RequestContext(colour=True, fields=RESULT))
        assert lines == [f"{Fore.GREEN}success{Style.RESET_ALL}\n"]

    def test_colour_only_touches_success(self, record):
        ctx = RequestContext(colour=True, verbose=True)
        lines = render(record, ctx)
        assert lines[0] == f"result: {Fore.GREEN}success{Style.RESET_ALL}\n"
        assert "\x1b" not in lines[1] + lines[2]


class TestRender:
    def test_fixed_field_order(self, record):
        ctx = RequestContext(verbose=True)
        assert render(record, ctx) == [
            "result: success\n",
            "buy: $ 5000.000000 USD\n",
            "sell: $ 4950.000000 USD\n",
        ]

    def test_idempotent(self, record):
        ctx = RequestContext(amount=3, verbose=True, colour=True)
        assert render(record, ctx) == render(record, ctx)

    def test_upstream_failure(self):
        failed = RateRecord.failure("no response")
        with pytest.raises(UpstreamFailureError, match="no response"):
            render(failed, RequestContext())


class TestCurrencyLines:
    def test_btce(self):
        lines = currency_lines("btce")
        assert [line.split()[0] for line in lines] == ["EUR", "RUR", "USD"]
        assert lines[2].endswith("US Dollar\n")


class TestRateRecord:
    def test_success_requires_prices(self):
        with pytest.raises(ValueError):
            RateRecord(success=True, buy=1, sell=1, buy_float=float("inf"), sell_float=1.0)

    def test_success_rejects_error_message(self):
        with pytest.raises(ValueError):
            RateRecord(success=True, buy=1, sell=1, buy_float=1.0, sell_float=1.0, error_message="x")
