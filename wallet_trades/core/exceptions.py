"""
Application-level exceptions.

Only boundary failures raise: missing configuration and failed fetches.
Malformed transaction data inside a successful response never does.
"""

from __future__ import annotations


class TradeHistoryError(Exception):
    """Base class for errors that abort a trade history run."""


class ConfigError(TradeHistoryError):
    """Missing credential or invalid wallet / mint address."""


class FetchError(TradeHistoryError):
    """Transaction history request failed (transport, HTTP status, or body shape)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
