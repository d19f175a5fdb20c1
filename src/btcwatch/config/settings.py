# src/btcwatch/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from BTCWATCH_* environment variables or a local .env file;
command-line flags override them per invocation.

Files that USE this module:
- btcwatch.app (loads settings for logging and the default exchange)
- btcwatch.adapters.exchanges.* (ticker URL templates)
- btcwatch.adapters.cli.parser (default currency and exchange)

Files that this module USES:
- btcwatch.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from btcwatch.shared.validators import (
    validate_currency_code,  # Validate 3-letter currency codes
    validate_log_level,  # Validate logging level names
)

EXCHANGES = ("mtgox", "btce")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Exchange ---
    exchange: str = Field(default="mtgox", alias="BTCWATCH_EXCHANGE")
    default_currency: str = Field(default="USD", alias="BTCWATCH_CURRENCY")

    # --- Ticker endpoints (the currency placeholder sits at a fixed offset) ---
    mtgox_url: str = Field(
        default="https://data.mtgox.com/api/2/BTCUSD/money/ticker_fast",
        alias="BTCWATCH_MTGOX_URL",
    )
    btce_url: str = Field(
        default="https://btc-e.com/api/2/btc_usd/ticker",
        alias="BTCWATCH_BTCE_URL",
    )

    # --- Logging ---
    # Diagnostics go to stderr once, from btcwatch.app; log records stay quiet unless asked for
    log_level: str = Field(default="CRITICAL", alias="BTCWATCH_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="BTCWATCH_LOG_FILE")
    log_max_bytes: int = Field(default=1024 * 1024, alias="BTCWATCH_LOG_MAX_BYTES", ge=1024)
    log_backup_count: int = Field(default=3, alias="BTCWATCH_LOG_BACKUP_COUNT", ge=0, le=50)

    @field_validator("exchange")
    @classmethod
    def validate_exchange(cls, v: str) -> str:
        """Validate exchange backend name."""
        v = v.strip().lower()
        if v not in EXCHANGES:
            raise ValueError(f"BTCWATCH_EXCHANGE must be one of {', '.join(EXCHANGES)}")
        return v

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """Validate currency code format."""
        if not validate_currency_code(v):
            raise ValueError("BTCWATCH_CURRENCY must be a 3-letter currency code")
        return v.upper()

    @field_validator("mtgox_url", "btce_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ticker templates must be http(s) URLs."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("ticker URL must start with http:// or https://")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level name."""
        if not validate_log_level(v):
            raise ValueError("BTCWATCH_LOG_LEVEL must be a logging level name")
        return v.upper()


# Global settings instance
settings = Settings()
