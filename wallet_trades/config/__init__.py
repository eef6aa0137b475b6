"""
Configuration management for wallet_trades.

Loads settings from environment variables (and .env) plus CLI arguments.
Exposes a single settings object per run.
"""

from wallet_trades.config.settings import TradeHistorySettings, get_settings  # noqa: F401

__all__ = ["TradeHistorySettings", "get_settings"]
