# src/btcwatch/application/monitor.py
"""
Monitor - Blocking Watch Loop

Repeats fetch, parse, render and print, then sleeps for the interval. Each
iteration completes (or fails) before the next begins; the loop ends on an
error or when the process is interrupted.

Files that USE this module:
- btcwatch.app (--watch runs a Monitor)
- tests.test_monitor (unit tests)

Files that this module USES:
- btcwatch.application.rates_service (RatesService)
- btcwatch.adapters.formatting.formatter (render)
- btcwatch.domain.models (RequestContext)
"""
from __future__ import annotations

import logging
import sys
import time
from typing import Callable, Optional, TextIO

from btcwatch.adapters.formatting.formatter import render
from btcwatch.application.rates_service import RatesService
from btcwatch.domain.models import RequestContext

logger = logging.getLogger(__name__)


class Monitor:
    def __init__(
        self,
        service: RatesService,
        interval: float,
        stream: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if interval <= 0:
            raise ValueError("watch interval must be positive")
        self.service = service
        self.interval = interval
        self.stream = stream or sys.stdout
        self.sleep = sleep or time.sleep

    def tick(self, ctx: RequestContext) -> None:
        """Run one fetch-parse-render-print iteration with a fresh fetch."""
        self.service.reset()
        record = self.service.rates(ctx.currency)
        self.stream.write("".join(render(record, ctx)))
        self.stream.flush()

    def run(self, ctx: RequestContext, iterations: Optional[int] = None) -> int:
        """
        Watch rates until interrupted.

        Args:
            ctx: Request context applied on every iteration
            iterations: Stop after this many iterations (None = forever)

        Returns:
            Number of completed iterations

        Raises:
            BtcwatchError: The first failure ends the loop
        """
        done = 0
        logger.info("Watching %s every %ss", ctx.currency, self.interval)
        while True:
            self.tick(ctx)
            done += 1
            if iterations is not None and done >= iterations:
                return done
            self.sleep(self.interval)
