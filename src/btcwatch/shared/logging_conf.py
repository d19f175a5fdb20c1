# src/btcwatch/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for btcwatch. Log
records go to stderr (stdout carries the rates, which scripts parse) and,
optionally, to a rotating log file.

Files that USE this module:
- btcwatch.app (setup_logging function for logging initialization)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union
from logging.handlers import RotatingFileHandler


def setup_logging(
    level: Union[int, str] = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 1024 * 1024,  # 1MB
    backup_count: int = 3,
) -> None:
    """
    Configure application-wide logging settings.

    Args:
        level: Logging level name or number (default: WARNING)
        log_file: Optional path to log file (enables file logging)
        max_bytes: Maximum size per log file before rotation (default: 1MB)
        backup_count: Number of backup log files to keep (default: 3)
    """
    log_format = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(log_format, date_format))
    handlers = [stderr_handler]

    log_file_path = None
    if log_file:
        log_file_path = Path(log_file).expanduser()
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(file_handler)

    # force=True so repeated main() calls (tests, watch restarts) do not stack handlers
    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured: file=%s, level=%s", log_file_path, logging.getLevelName(level))
