# src/btcwatch/app.py
"""
Application Entry Point - Command-Line Composition Root

This module wires settings, logging, the exchange adapter and the services,
runs one invocation and turns its outcome into an exit code. It is the only
place that prints diagnostics or decides how the process exits.

Files that USE this module:
- btcwatch console script (run)
- python -m btcwatch (btcwatch.__main__)
- tests.test_app (end-to-end tests with a stubbed fetcher)

Files that this module USES:
- btcwatch.shared.logging_conf (setup_logging for logging configuration)
- btcwatch.config (settings for configuration management)
- btcwatch.adapters.cli (argument parsing, help and version text)
- btcwatch.adapters.exchanges (build_exchange)
- btcwatch.adapters.formatting (render)
- btcwatch.application (RatesService, Monitor)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes and streams
from typing import Optional, Sequence, TextIO  # Type hints for argv and output streams

from colorama import init as colorama_init  # ANSI colour support on Windows consoles

from btcwatch.shared.logging_conf import setup_logging  # Configure logging with file rotation
from btcwatch.config import settings  # Application configuration and settings
from btcwatch.adapters.cli import build_context, build_parser, help_text, version_text  # Flag handling
from btcwatch.adapters.exchanges import build_exchange  # Exchange adapter factory
from btcwatch.adapters.formatting import render  # Rate conversion and output lines
from btcwatch.adapters.http import fetch  # Default ticker transport
from btcwatch.application import Monitor, RatesService  # Retrieval and watch loop
from btcwatch.application.rates_service import Fetcher  # Transport type
from btcwatch.domain.errors import BtcwatchError  # Base of every terminal failure

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = logging.getLogger(__name__)


def main(
    argv: Optional[Sequence[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    fetcher: Fetcher = fetch,
) -> int:
    """
    Run one btcwatch invocation.

    Args:
        argv: Command-line arguments without the program name (default: sys.argv[1:])
        stdout: Stream for rates, help and version text
        stderr: Stream for diagnostics
        fetcher: Transport used to retrieve ticker documents

    Returns:
        Process exit code (0 on success, 1 on any btcwatch error)
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(argv)  # argparse reports syntax errors itself (exit 2)

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    try:
        exchange = build_exchange(args.exchange or settings.exchange)

        if args.help_topic is not None:
            stdout.write(help_text(parser, args.help_topic, exchange.name))
            return EXIT_SUCCESS

        if args.version:
            stdout.write(version_text(exchange.display_name))
            return EXIT_SUCCESS

        ctx = build_context(args)
        service = RatesService(exchange, fetcher)

        if args.watch:
            monitor = Monitor(service, args.watch, stream=stdout)
            try:
                monitor.run(ctx)
            except KeyboardInterrupt:
                logger.info("Watch stopped by user (KeyboardInterrupt)")
            return EXIT_SUCCESS

        record = service.rates(ctx.currency)
        stdout.write("".join(render(record, ctx)))
        stdout.flush()
    except BtcwatchError as e:
        logger.debug("Invocation failed: %s (type: %s)", e, type(e).__name__)
        stderr.write(f"{parser.prog}: {e}\n")
        return EXIT_FAILURE

    return EXIT_SUCCESS


def run() -> None:
    """Console-script entry point."""
    colorama_init()
    sys.exit(main())


if __name__ == "__main__":
    run()
