"""Core exceptions shared by the fetcher, config layer, and CLI."""

from wallet_trades.core.exceptions import ConfigError, FetchError, TradeHistoryError

__all__ = ["ConfigError", "FetchError", "TradeHistoryError"]
