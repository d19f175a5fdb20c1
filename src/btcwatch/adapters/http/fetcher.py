# src/btcwatch/adapters/http/fetcher.py
"""
Ticker Fetcher - The Only Network Boundary

Performs a single blocking HTTP GET of a ticker URL and returns the body as
text. There is no retry and no timeout beyond the transport default; any
failure is reported as NetworkError carrying the underlying cause.

Files that USE this module:
- btcwatch.application.rates_service (RatesService fetches through a Fetcher)
- tests.test_fetcher (unit tests)

Files that this module USES:
- btcwatch.domain.errors (NetworkError)
"""
import logging

import requests

from btcwatch import __version__
from btcwatch.domain.errors import NetworkError

log = logging.getLogger(__name__)

USER_AGENT = f"btcwatch/{__version__}"


def fetch(url: str) -> str:
    """
    Fetch a ticker document.

    Args:
        url: Fully built ticker URL

    Returns:
        Raw response body as text

    Raises:
        NetworkError: On DNS failure, refused connection, timeout or non-2xx status
    """
    try:
        log.info("Fetching ticker from %s", url)
        resp = requests.get(url, headers={"User-Agent": USER_AGENT})
        resp.raise_for_status()
    except requests.exceptions.Timeout as e:
        log.error("Ticker request timed out: %s", e)
        raise NetworkError(f"ticker request timed out: {url}") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        log.error("Ticker HTTP error %s: %s", status, e)
        raise NetworkError(f"ticker request failed with HTTP {status}: {url}") from e
    except requests.exceptions.RequestException as e:
        log.error("Ticker request failed (network/connection error): %s", e)
        raise NetworkError(f"ticker request failed: {e}") from e

    log.debug("Ticker response: %d bytes", len(resp.content))
    return resp.text
