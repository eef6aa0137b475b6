"""
Trade analytics: execution classification, flow accounting, implied pricing.

Modules: flow_accountant, execution_classifier, price_deriver, trade_pipeline.
"""

from wallet_trades.analytics.execution_classifier import ExecutionKind, classify_execution
from wallet_trades.analytics.flow_accountant import mint_filter, net_delta
from wallet_trades.analytics.price_deriver import implied_price
from wallet_trades.analytics.trade_pipeline import (
    TradeHistory,
    TradeRow,
    build_row,
    iter_transactions,
    run_trade_history,
)

__all__ = [
    "ExecutionKind",
    "TradeHistory",
    "TradeRow",
    "build_row",
    "classify_execution",
    "implied_price",
    "iter_transactions",
    "mint_filter",
    "net_delta",
    "run_trade_history",
]
