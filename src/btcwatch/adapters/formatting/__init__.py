# src/btcwatch/adapters/formatting/__init__.py
"""
Formatting Adapters - Terminal Output

This package converts rates and renders the lines btcwatch prints.
"""

from btcwatch.adapters.formatting.formatter import convert, currency_lines, render

__all__ = [
    "convert",
    "currency_lines",
    "render",
]
