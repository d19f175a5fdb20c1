# src/btcwatch/__init__.py
"""
btcwatch - Bitcoin Ticker Command-Line Utility

Fetches the current Bitcoin buy/sell rates from an exchange ticker API,
converts them for a requested amount and currency, and prints the result
for humans or shell scripts.
"""

__version__ = "1.2.0"
__author__ = "Marco Scannadinari"
