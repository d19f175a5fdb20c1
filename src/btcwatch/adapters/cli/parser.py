# src/btcwatch/adapters/cli/parser.py
"""
Command-Line Parser - Flags, Help Topics and Version Banner

This module defines btcwatch's command-line surface and turns parsed flags
into a RequestContext. Help and version output are returned as text; printing
and exiting are left to btcwatch.app.

Files that USE this module:
- btcwatch.app (build_parser, build_context, help_text, version_text)
- tests.test_cli (unit tests)

Files that this module USES:
- btcwatch.adapters.formatting.formatter (currency_lines for --help=currencies)
- btcwatch.config (default currency, exchange names)
- btcwatch.domain (currency table, RequestContext, UnknownTopicError)
- btcwatch.shared.validators (numeric argument validation)
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from btcwatch import __version__
from btcwatch.adapters.formatting.formatter import currency_lines
from btcwatch.config import EXCHANGES, settings
from btcwatch.domain.currencies import lookup, normalize_code
from btcwatch.domain.errors import UnknownTopicError
from btcwatch.domain.models import ALL_FIELDS, OutputField, RequestContext
from btcwatch.shared.validators import validate_numeric_input

TOPICS = ("currencies", "topics")


def _amount(value: str) -> float:
    if not validate_numeric_input(value, min_val=0.0):
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    return float(value)


def _interval(value: str) -> float:
    if not validate_numeric_input(value) or float(value) <= 0:
        raise argparse.ArgumentTypeError(f"invalid interval: {value!r}")
    return float(value)


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    """Build the argument parser; help is handled as a topic-aware option."""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Get and monitor Bitcoin trade information",
        epilog="With no output field selected, result, buy and sell are printed verbosely.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    fields = parser.add_argument_group("output fields")
    fields.add_argument("-a", "--all", action="store_true", help="equivalent to -pbs")
    fields.add_argument("-b", "--buy", action="store_true", help="print buy price")
    fields.add_argument("-s", "--sell", action="store_true", help="print sell price")
    fields.add_argument(
        "-p", "--ping", action="store_true", help="check for a successful JSON response"
    )

    conversion = parser.add_argument_group("conversion")
    conversion.add_argument(
        "-c", "--currency", metavar="CURRENCY", help="set conversion currency"
    )
    conversion.add_argument(
        "-n", "--amount", metavar="AMOUNT", type=_amount, default=1.0,
        help="sets the amount of Bitcoin to convert",
    )
    conversion.add_argument(
        "-r", "--reverse", action="store_true", help="convert currency to Bitcoin"
    )
    conversion.add_argument(
        "-x", "--exchange", choices=EXCHANGES, help="exchange to query (default: configured)"
    )

    presentation = parser.add_argument_group("presentation")
    presentation.add_argument(
        "-v", "--verbose", action="store_true", help="increase verbosity"
    )
    presentation.add_argument(
        "-o", "--colour", "--color", dest="colour", action="store_true",
        help="enables use of colour",
    )
    presentation.add_argument(
        "-w", "--watch", metavar="SECONDS", type=_interval,
        help="keep printing rates every SECONDS until interrupted",
    )

    info = parser.add_argument_group("information")
    info.add_argument(
        "-?", "-h", "--help", dest="help_topic", nargs="?", const="", metavar="TOPIC",
        help="print this help, or help designated by topic; use --help=topics for available topics",
    )
    info.add_argument("-V", "--version", action="store_true", help="print version number")
    return parser


def requested_fields(args: argparse.Namespace) -> List[OutputField]:
    """Return the output fields selected by flags, in print order."""
    if args.all:
        return list(OutputField)
    selected = {
        OutputField.RESULT: args.ping,
        OutputField.BUY: args.buy,
        OutputField.SELL: args.sell,
    }
    return [field for field in OutputField if selected[field]]


def build_context(args: argparse.Namespace) -> RequestContext:
    """
    Build the request context from parsed flags.

    With no output field selected, result, buy and sell are printed in
    verbose form.

    Raises:
        InvalidCurrencyError: If --currency is malformed or unknown
    """
    raw = args.currency if args.currency is not None else settings.default_currency
    info = lookup(normalize_code(raw))
    fields = requested_fields(args)
    verbose = args.verbose
    if not fields:
        fields = list(ALL_FIELDS)
        verbose = True
    return RequestContext(
        currency=info.code,
        amount=args.amount,
        reverse=args.reverse,
        verbose=verbose,
        colour=args.colour,
        fields=frozenset(fields),
    )


def help_text(parser: argparse.ArgumentParser, topic: str, exchange: str) -> str:
    """
    Return the help text for a topic ("" means general usage).

    Raises:
        UnknownTopicError: If the topic does not exist
    """
    if not topic:
        return parser.format_help()
    if topic == "currencies":
        return "".join(currency_lines(exchange))
    if topic == "topics":
        return "".join(f"{t}\n" for t in TOPICS)
    raise UnknownTopicError(f"no such topic: {topic!r} (try --help=topics)")


def version_text(exchange_display_name: str) -> str:
    return (
        f"btcwatch {__version__} ({exchange_display_name})\n"
        "Copyright (C) Marco Scannadinari.\n"
        "License GPLv3+: GNU GPL version 3 or later <http://gnu.org/licenses/gpl.html>\n"
        "This is free software: you are free to change and redistribute it.\n"
        "There is NO WARRANTY, to the extent permitted by law.\n"
        "\n"
        "Written by Marco Scannadinari.\n"
    )
