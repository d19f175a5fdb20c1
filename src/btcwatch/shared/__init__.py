# src/btcwatch/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from btcwatch.shared.validators import (
    validate_currency_code,
    validate_log_level,
    validate_numeric_input,
    validate_url_template,
)
from btcwatch.shared.logging_conf import setup_logging

__all__ = [
    "validate_currency_code",
    "validate_log_level",
    "validate_numeric_input",
    "validate_url_template",
    "setup_logging",
]
