# tests/conftest.py
"""
Shared Test Fixtures - Synthetic Ticker Documents

Builders for MtGox and BTC-E ticker bodies so tests never touch the network.
"""
import json  # Serialize synthetic ticker documents

import pytest  # Testing framework for fixtures


def mtgox_body(buy=500000, sell=495000, buy_value="5000.00", sell_value="4950.00",
               currency="USD", result="success"):
    """Build a MtGox ticker_fast body."""
    return json.dumps({
        "result": result,
        "data": {
            "buy": {"value": buy_value, "value_int": str(buy), "currency": currency},
            "sell": {"value": sell_value, "value_int": str(sell), "currency": currency},
            "now": "1370000000000000",
        },
    })


def btce_body(buy=5000.0, sell=4950.0):
    """Build a BTC-E ticker body."""
    return json.dumps({
        "ticker": {
            "high": 5100.0, "low": 4800.0, "avg": 4950.0, "vol": 1000.0,
            "last": 4990.0, "buy": buy, "sell": sell, "server_time": 1370000000,
        },
    })


@pytest.fixture
def mtgox_ok():
    return mtgox_body()


@pytest.fixture
def btce_ok():
    return btce_body()
