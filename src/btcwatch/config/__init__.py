# src/btcwatch/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and an optional .env file.
"""

from btcwatch.config.settings import EXCHANGES, Settings, settings

__all__ = ["EXCHANGES", "Settings", "settings"]
