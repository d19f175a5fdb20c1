# tests/test_app.py
"""
Application Tests - End-to-End Invocations with a Stubbed Fetcher

These tests run btcwatch.app.main exactly as the console script does, but
with in-memory streams and a Mock transport, and check printed output and
exit codes.

Files that this module USES:
- btcwatch.app (main)
- unittest.mock (Mock for the fetcher)
- pytest (testing framework)
"""
import io  # In-memory stdout/stderr
import json  # Build failure documents

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock transport and time.sleep

from btcwatch.app import EXIT_FAILURE, EXIT_SUCCESS, main, run
from btcwatch.domain.errors import NetworkError
from conftest import btce_body, mtgox_body


def _run(argv, fetcher=None):
    out, err = io.StringIO(), io.StringIO()
    fetcher = fetcher or Mock(return_value=mtgox_body())
    code = main(argv, stdout=out, stderr=err, fetcher=fetcher)
    return code, out.getvalue(), err.getvalue(), fetcher


class TestOneShot:
    def test_no_flags_prints_everything_verbosely(self):
        code, out, err, fetcher = _run([])
        assert code == EXIT_SUCCESS
        assert out == "result: success\nbuy: $ 5000.000000 USD\nsell: $ 4950.000000 USD\n"
        assert err == ""
        fetcher.assert_called_once()

    def test_buy_and_sell_fetch_once(self):
        code, out, _, fetcher = _run(["-b", "-s"])
        assert code == EXIT_SUCCESS
        assert out == "5000.000000\n4950.000000\n"
        fetcher.assert_called_once_with("https://data.mtgox.com/api/2/BTCUSD/money/ticker_fast")

    def test_ping(self):
        code, out, _, _ = _run(["-p"])
        assert (code, out) == (EXIT_SUCCESS, "success\n")

    def test_currency_and_amount(self):
        fetcher = Mock(return_value=mtgox_body(currency="EUR"))
        code, out, _, _ = _run(["-vb", "-c", "eur", "-n", "2"], fetcher)
        assert code == EXIT_SUCCESS
        assert out == "buy: € 10000.000000 EUR\n"
        fetcher.assert_called_once_with("https://data.mtgox.com/api/2/BTCEUR/money/ticker_fast")

    def test_reverse(self):
        code, out, _, _ = _run(["-rs", "-n", "99"])
        assert (code, out) == (EXIT_SUCCESS, "0.020000\n")

    def test_btce_exchange(self):
        fetcher = Mock(return_value=btce_body())
        code, out, _, _ = _run(["-x", "btce", "-b", "-c", "rur"], fetcher)
        assert (code, out) == (EXIT_SUCCESS, "5000.000000\n")
        fetcher.assert_called_once_with("https://btc-e.com/api/2/btc_rur/ticker")

    def test_btce_sub_cent_price_is_not_rounded(self):
        fetcher = Mock(return_value=btce_body(buy=5000.12345))
        code, out, _, _ = _run(["-x", "btce", "-b", "-n", "1000"], fetcher)
        assert (code, out) == (EXIT_SUCCESS, "5000123.450000\n")


class TestFailures:
    @pytest.mark.parametrize("code_arg", ["us", "xyz", "", "usd "])
    def test_invalid_currency_never_fetches(self, code_arg):
        code, out, err, fetcher = _run(["-b", "-c", code_arg])
        assert code == EXIT_FAILURE
        assert out == ""
        assert "invalid currency" in err
        fetcher.assert_not_called()

    def test_empty_currency_does_not_fall_back_to_default(self):
        code, out, err, fetcher = _run(["-b", "-c", ""])
        assert code == EXIT_FAILURE
        assert out == ""
        assert "must be 3 characters long" in err
        fetcher.assert_not_called()

    def test_currency_not_on_exchange(self):
        code, _, err, fetcher = _run(["-x", "btce", "-c", "gbp"])
        assert code == EXIT_FAILURE
        assert "not supported by BTC-E" in err
        fetcher.assert_not_called()

    def test_network_error(self):
        fetcher = Mock(side_effect=NetworkError("ticker request failed: connection refused"))
        code, out, err, _ = _run(["-b"], fetcher)
        assert code == EXIT_FAILURE
        assert out == ""
        assert err.endswith(": ticker request failed: connection refused\n")

    def test_malformed_response(self):
        code, out, err, _ = _run(["-b"], Mock(return_value="<html></html>"))
        assert code == EXIT_FAILURE
        assert "invalid JSON" in err

    def test_upstream_failure_prints_nothing(self):
        body = json.dumps({"result": "error", "error": "no response"})
        code, out, err, _ = _run(["-pbs"], Mock(return_value=body))
        assert code == EXIT_FAILURE
        assert out == ""
        assert err.endswith(": no response\n")


class TestInformation:
    def test_help(self):
        code, out, _, fetcher = _run(["--help"])
        assert code == EXIT_SUCCESS
        assert "usage:" in out
        fetcher.assert_not_called()

    def test_help_currencies(self):
        code, out, _, _ = _run(["--help=currencies"])
        assert code == EXIT_SUCCESS
        assert len(out.splitlines()) == 17

    def test_unknown_topic(self):
        code, _, err, _ = _run(["--help=weather"])
        assert code == EXIT_FAILURE
        assert "no such topic" in err

    def test_version(self):
        code, out, _, fetcher = _run(["-V"])
        assert code == EXIT_SUCCESS
        assert "(MtGox)" in out.splitlines()[0]
        fetcher.assert_not_called()

    def test_bad_syntax_is_argparse_error(self):
        with pytest.raises(SystemExit) as excinfo:
            _run(["--no-such-flag"])
        assert excinfo.value.code == 2


class TestWatch:
    @patch('btcwatch.application.monitor.time.sleep')
    def test_interrupt_ends_watch_cleanly(self, mock_sleep):
        mock_sleep.side_effect = [None, KeyboardInterrupt()]
        fetcher = Mock(return_value=mtgox_body())

        code, out, _, _ = _run(["-b", "--watch=60"], fetcher)

        assert code == EXIT_SUCCESS
        assert out == "5000.000000\n5000.000000\n"
        assert fetcher.call_count == 2


class TestRun:
    @patch('btcwatch.app.main', return_value=EXIT_SUCCESS)
    @patch('btcwatch.app.colorama_init')
    def test_initialises_colorama_then_exits(self, mock_init, mock_main):
        with pytest.raises(SystemExit) as excinfo:
            run()
        assert excinfo.value.code == EXIT_SUCCESS
        mock_init.assert_called_once_with()
        mock_main.assert_called_once_with()
