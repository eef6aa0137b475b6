"""
structlog configuration for the trade history CLI.

stdout carries the trade table, so every log line goes to stderr. An
interactive terminal gets the console renderer; a redirected stderr gets one
JSON object per line. LOG_FORMAT (json | console) and LOG_LEVEL override.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog


def _use_json(fmt: str | None) -> bool:
    fmt = (fmt or os.getenv("LOG_FORMAT") or "").strip().lower()
    if fmt in ("json", "console"):
        return fmt == "json"
    return not sys.stderr.isatty()


def configure_logging(level: str | None = None, fmt: str | None = None, stream: Any = None) -> None:
    """Configure structlog; JSON lines carry the event name under event_type. stream defaults to stderr."""
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if _use_json(fmt):
        processors.append(structlog.processors.EventRenamer("event_type"))
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream if stream is not None else sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """Module logger; call as logger.info("event_name", key=value)."""
    return structlog.get_logger(name).bind(logger=name)


def bind_wallet(wallet: str, name: str = "wallet_trades") -> structlog.BoundLogger:
    """Logger for one CLI run with the (truncated) wallet bound to every line."""
    short = wallet[:16] + "..." if len(wallet) > 16 else wallet
    return get_logger(name).bind(wallet=short)
