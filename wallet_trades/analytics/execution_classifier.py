"""
Execution classifier: how a transaction was executed and through which venue.

Order of checks matters: swap events, then dex events, then a log keyword
heuristic. Each rule fires only on a non-empty list. Never raises.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from wallet_trades.solana_listener.models import DexEvent, SwapEvent, TransactionRecord


class ExecutionKind(str, Enum):
    SWAP = "SWAP"
    LIMIT = "LIMIT"
    OTHER = "OTHER"


DEFAULT_SWAP_ROUTE = "router/amm"
DEFAULT_DEX_ROUTE = "DEX"
# Low-confidence marker for the log heuristic; consumers rely on the "(?)".
LOG_ORDERBOOK_ROUTE = "orderbook(?)"

# Substring of the lowercased dex label -> canonical venue name
CANONICAL_DEX_VENUES = (
    ("phoenix", "Phoenix"),
    ("openbook", "OpenBook"),
)

LIMIT_ORDER_LOG_MARKERS = ("placeorder", "postonly", "ioc", "fok")


def _first_present(*values: str | None) -> str | None:
    for v in values:
        if v is not None:
            return v
    return None


def _swap_venue(event: SwapEvent) -> str | None:
    return _first_present(event.source, event.liquidity_source, event.program_info.source)


def _dex_venue(event: DexEvent) -> str | None:
    return _first_present(event.market, event.program_info.name, event.program_info.market)


def _join_resolved(names: Iterable[str | None]) -> str:
    return ",".join(n for n in names if n is not None)


def swap_route(events: Iterable[SwapEvent]) -> str:
    return _join_resolved(_swap_venue(e) for e in events) or DEFAULT_SWAP_ROUTE


def dex_route(events: Iterable[DexEvent]) -> str:
    """Lowercased comma-joined market names, collapsed to a canonical venue when one is recognised."""
    label = _join_resolved(_dex_venue(e) for e in events).lower()
    for needle, canonical in CANONICAL_DEX_VENUES:
        if needle in label:
            return canonical
    return label or DEFAULT_DEX_ROUTE


def classify_execution(tx: TransactionRecord) -> tuple[ExecutionKind, str]:
    """
    Return (kind, route) for a transaction.

    SWAP when swap events exist, LIMIT when dex events exist, LIMIT with
    "orderbook(?)" when the logs mention an order type, else (OTHER, "").
    Logs of a failed transaction are ignored.
    """
    if tx.events.swap:
        return ExecutionKind.SWAP, swap_route(tx.events.swap)
    if tx.events.dex:
        return ExecutionKind.LIMIT, dex_route(tx.events.dex)

    logs = () if tx.failed else tx.logs
    text = " ".join(logs).lower()
    if any(marker in text for marker in LIMIT_ORDER_LOG_MARKERS):
        return ExecutionKind.LIMIT, LOG_ORDERBOOK_ROUTE
    return ExecutionKind.OTHER, ""
