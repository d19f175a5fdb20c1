# src/btcwatch/adapters/formatting/formatter.py
"""
Rate Formatter - Conversion and Text Presentation

This module turns a parsed RateRecord into the lines btcwatch prints. It
converts prices for the requested amount and direction and renders them
either labelled (verbose) or as bare numbers for shell scripts. Everything
here is pure: no I/O, same input gives the same lines.

Files that USE this module:
- btcwatch.app (render for one-shot output)
- btcwatch.application.monitor (render on every watch iteration)
- btcwatch.adapters.cli.parser (currency_lines for --help=currencies)
- tests.test_formatter (unit tests)

Files that this module USES:
- btcwatch.domain (RateRecord, RequestContext, currency table, UpstreamFailureError)
- colorama (ANSI colour codes)
"""
from __future__ import annotations

from decimal import Decimal
from typing import List, Tuple, Union

from colorama import Fore, Style

from btcwatch.domain.currencies import BITCOIN, lookup, supported_currencies
from btcwatch.domain.errors import UpstreamFailureError
from btcwatch.domain.models import CurrencyInfo, OutputField, RateRecord, RequestContext

SUCCESS = "success"


def _success_text(colour: bool) -> str:
    if colour:
        return f"{Fore.GREEN}{SUCCESS}{Style.RESET_ALL}"
    return SUCCESS


def convert(
    record: RateRecord, field: OutputField, ctx: RequestContext
) -> Tuple[Union[Decimal, float], CurrencyInfo]:
    """
    Convert one price for the requested amount and direction.

    Forward: ``price_int * amount / scale`` in the quote currency, computed
    exactly with Decimal; ``scale`` is the record's price_scale, or the
    currency's scale_factor when the record has none.
    Reverse: ``amount / price_float`` in Bitcoin.

    Args:
        record: Successful RateRecord
        field: OutputField.BUY or OutputField.SELL
        ctx: Request context holding currency, amount and direction

    Returns:
        (value, unit) where unit is the currency the value is expressed in
    """
    if field is OutputField.BUY:
        price_int, price_float = record.buy, record.buy_float
    elif field is OutputField.SELL:
        price_int, price_float = record.sell, record.sell_float
    else:
        raise ValueError(f"{field.value} has no price")

    if ctx.reverse:
        return ctx.amount / price_float, BITCOIN

    info = lookup(ctx.currency)
    scale = record.price_scale or info.scale_factor
    return Decimal(price_int) * Decimal(str(ctx.amount)) / scale, info


def render(record: RateRecord, ctx: RequestContext) -> List[str]:
    """
    Render the requested fields as output lines.

    Fields are printed in the order result, buy, sell. Verbose lines look
    like ``buy: $ 5000.000000 USD``; otherwise only the number is printed.
    The result field is always the word "success".

    Args:
        record: Parsed rates
        ctx: Request context

    Returns:
        Lines, each terminated with a newline

    Raises:
        UpstreamFailureError: If the record reports failure (nothing is rendered)
    """
    if not record.success:
        raise UpstreamFailureError(record.error_message or "exchange reported failure")

    lines = []
    for field in OutputField:
        if field not in ctx.fields:
            continue

        if field is OutputField.RESULT:
            text = _success_text(ctx.colour)
            lines.append(f"result: {text}\n" if ctx.verbose else f"{text}\n")
            continue

        value, unit = convert(record, field, ctx)
        if ctx.verbose:
            lines.append(f"{field.value}: {unit.sign} {value:.6f} {unit.code}\n")
        else:
            lines.append(f"{value:.6f}\n")
    return lines


def currency_lines(exchange: str) -> List[str]:
    """List an exchange's currencies as ``CODE  SIGN  Name`` lines."""
    return [
        f"{info.code}  {info.sign:<4} {info.name}\n"
        for info in supported_currencies(exchange)
    ]
