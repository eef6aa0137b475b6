"""
Structured logging for wallet_trades.

Use get_logger() in every module so log lines share the same keys.
"""

from wallet_trades.trades_logging.logger import bind_wallet, configure_logging, get_logger

__all__ = ["bind_wallet", "configure_logging", "get_logger"]
