"""
Transaction history source.

Fetches a wallet's enhanced transaction history page by page and normalizes
each raw JSON item into TransactionRecord for the analytics pipeline.
"""

from wallet_trades.solana_listener.fetcher import HeliusHistoryClient
from wallet_trades.solana_listener.models import (
    DexEvent,
    Events,
    NativeTransfer,
    ProgramInfo,
    SwapEvent,
    TokenTransfer,
    TransactionRecord,
    TransferLeg,
    parse_base_units,
)

__all__ = [
    "DexEvent",
    "Events",
    "HeliusHistoryClient",
    "NativeTransfer",
    "ProgramInfo",
    "SwapEvent",
    "TokenTransfer",
    "TransactionRecord",
    "TransferLeg",
    "parse_base_units",
]
