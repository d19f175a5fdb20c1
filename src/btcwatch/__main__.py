# src/btcwatch/__main__.py
"""Allow ``python -m btcwatch``."""

from btcwatch.app import run

run()
