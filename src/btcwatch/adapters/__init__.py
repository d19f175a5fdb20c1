# src/btcwatch/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Exchanges (ticker URL building and parsing)
- HTTP (ticker fetching)
- Formatting (terminal output)
- CLI (command-line flags)
"""

__all__ = []
