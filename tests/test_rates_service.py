# tests/test_rates_service.py
"""
Rates Service Tests - Unit Tests for Validation, Single Fetch and Parsing

Files that this module USES:
- btcwatch.application.rates_service (RatesService)
- btcwatch.adapters.exchanges (MtGoxExchange)
- unittest.mock (Mock for the fetcher)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock objects for testing without real dependencies

from btcwatch.adapters.exchanges import MtGoxExchange
from btcwatch.application.rates_service import RatesService
from btcwatch.domain.errors import InvalidCurrencyError, MalformedResponseError, NetworkError
from conftest import mtgox_body

MTGOX_URL = "https://data.mtgox.com/api/2/BTCUSD/money/ticker_fast"


@pytest.fixture
def exchange():
    return MtGoxExchange(MTGOX_URL)


class TestRatesService:
    def test_init(self, exchange):
        fetcher = Mock()
        service = RatesService(exchange, fetcher)
        assert service.exchange is exchange
        assert not service.fetched

    def test_fetches_built_url(self, exchange):
        fetcher = Mock(return_value=mtgox_body(currency="EUR"))
        service = RatesService(exchange, fetcher)

        record = service.rates("EUR")

        assert record.buy == 500000
        fetcher.assert_called_once_with("https://data.mtgox.com/api/2/BTCEUR/money/ticker_fast")

    def test_single_fetch_for_repeated_requests(self, exchange):
        fetcher = Mock(return_value=mtgox_body())
        service = RatesService(exchange, fetcher)

        first = service.rates("USD")
        second = service.rates("USD")

        assert first is second
        assert service.fetched
        fetcher.assert_called_once()

    def test_reset_allows_refetch(self, exchange):
        fetcher = Mock(return_value=mtgox_body())
        service = RatesService(exchange, fetcher)

        service.rates("USD")
        service.reset()
        service.rates("USD")

        assert fetcher.call_count == 2

    @pytest.mark.parametrize("code", ["US", "USDT", "XYZ", "RUR"])
    def test_invalid_currency_never_fetches(self, exchange, code):
        fetcher = Mock()
        service = RatesService(exchange, fetcher)

        with pytest.raises(InvalidCurrencyError):
            service.rates(code)
        fetcher.assert_not_called()

    def test_network_error_propagates(self, exchange):
        fetcher = Mock(side_effect=NetworkError("ticker request failed: refused"))
        service = RatesService(exchange, fetcher)

        with pytest.raises(NetworkError):
            service.rates("USD")
        assert not service.fetched

    def test_malformed_body_propagates(self, exchange):
        service = RatesService(exchange, Mock(return_value="not json"))
        with pytest.raises(MalformedResponseError):
            service.rates("USD")

    def test_failure_record_is_returned(self, exchange):
        service = RatesService(exchange, Mock(return_value='{"result": "error", "error": "no response"}'))
        record = service.rates("USD")
        assert not record.success
        assert record.error_message == "no response"
