# src/btcwatch/shared/validators.py
"""
Input Validation Utilities - Configuration and Argument Validation

This module provides the validation functions shared by the settings layer
and the command-line parser: currency codes, URL templates, log levels and
numeric arguments.

Files that USE this module:
- btcwatch.config.settings (uses validation functions in Settings field validators)
- btcwatch.adapters.cli.parser (validates --amount and --watch)

Files that this module USES:
- None (pure utility functions)
"""
import logging
import math
import re
from typing import Optional


def validate_currency_code(code: str) -> bool:
    """
    Validate the shape of a currency code.

    Args:
        code: Code to validate

    Returns:
        True if the code is three ASCII letters, False otherwise
    """
    if not code:
        return False
    return bool(re.match(r'^[A-Za-z]{3}$', code))


def validate_url_template(template: str, offset: int, length: int = 3) -> bool:
    """
    Validate a ticker URL template.

    The template must be an http(s) URL holding a currency code (letters only)
    at exactly ``offset``; that range is what gets overwritten with the
    requested code.

    Args:
        template: URL template to validate
        offset: Position of the currency placeholder
        length: Length of the placeholder

    Returns:
        True if valid, False otherwise
    """
    if not template or not re.match(r'^https?://', template):
        return False
    region = template[offset:offset + length]
    return len(region) == length and region.isascii() and region.isalpha()


def validate_log_level(level: str) -> bool:
    """Return True if ``level`` names a standard logging level."""
    return isinstance(logging.getLevelName(str(level).upper()), int)


def validate_numeric_input(value: str, min_val: Optional[float] = None,
                          max_val: Optional[float] = None) -> bool:
    """
    Validate numeric input string.

    Args:
        value: String value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        True if valid, False otherwise
    """
    if not value:
        return False

    try:
        num_val = float(value)
        if not math.isfinite(num_val):
            return False
        if min_val is not None and num_val < min_val:
            return False
        if max_val is not None and num_val > max_val:
            return False
        return True
    except ValueError:
        return False
