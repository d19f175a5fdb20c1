# src/btcwatch/adapters/cli/__init__.py
"""
CLI Adapter - Command-Line Interface

Argument parsing, help topics and the version banner.
"""

from btcwatch.adapters.cli.parser import (
    build_context,
    build_parser,
    help_text,
    requested_fields,
    version_text,
)

__all__ = [
    "build_context",
    "build_parser",
    "help_text",
    "requested_fields",
    "version_text",
]
