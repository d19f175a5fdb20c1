# src/btcwatch/domain/errors.py
"""
Domain Errors - Failure Taxonomy for a Ticker Invocation

Every failure in btcwatch is terminal for the current invocation. Lower layers
raise these exceptions; only the composition root (btcwatch.app) turns them
into a diagnostic and an exit code.

Files that USE this module:
- btcwatch.domain.currencies (InvalidCurrencyError)
- btcwatch.adapters.exchanges.* (InvalidCurrencyError, MalformedResponseError)
- btcwatch.adapters.http.fetcher (NetworkError)
- btcwatch.adapters.formatting.formatter (UpstreamFailureError)
- btcwatch.adapters.cli.parser (UnknownTopicError)
- btcwatch.app (catches BtcwatchError)

Files that this module USES:
- None (pure domain layer)
"""


class BtcwatchError(Exception):
    """Base exception for every btcwatch failure."""
    pass


class InvalidCurrencyError(BtcwatchError):
    """Raised when a currency code is malformed or not supported by the exchange."""
    pass


class NetworkError(BtcwatchError):
    """Raised when the ticker endpoint cannot be reached or answers with a non-2xx status."""
    pass


class MalformedResponseError(BtcwatchError):
    """Raised when the ticker body is not JSON or lacks the expected fields."""
    pass


class UpstreamFailureError(BtcwatchError):
    """Raised when a well-formed ticker document reports the exchange's own failure."""
    pass


class UnknownTopicError(BtcwatchError):
    """Raised when help is requested for a topic that does not exist."""
    pass


class ConfigurationError(BtcwatchError):
    """Raised when the configured exchange backend is unknown."""
    pass
