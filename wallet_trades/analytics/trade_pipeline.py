"""
Trade history pipeline: fetch pages -> classify -> net flows -> price -> rows.

Pages are read strictly in sequence because each request's `before` cursor is
the last signature of the previous page. Every fetched transaction produces
exactly one row; only the first `max_rows` rows are returned for display.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Iterator

from wallet_trades.analytics.execution_classifier import classify_execution
from wallet_trades.analytics.flow_accountant import mint_filter, net_delta
from wallet_trades.analytics.price_deriver import SOL_DECIMALS, implied_price
from wallet_trades.config.env import DEFAULT_LIMIT, DEFAULT_MAX_ROWS
from wallet_trades.solana_listener.fetcher import MAX_PAGE_SIZE
from wallet_trades.solana_listener.models import FetchPage, TransactionRecord
from wallet_trades.trades_logging import get_logger
from wallet_trades.utils.wallet_utils import short_address

logger = get_logger(__name__)

# Token decimals are not looked up from the mint; every mint is treated as 6.
DEFAULT_TOKEN_DECIMALS = 6
SIGNATURE_PREVIEW_LEN = 10

DIRECTION_BUY = "BUY"
DIRECTION_SELL = "SELL"
DIRECTION_NEUTRAL = "NEUTRAL"

ROW_COLUMNS = (
    "time",
    "sig",
    "exec",
    "route",
    "direction",
    "sol_change",
    "token_change",
    "est_px_SOL",
)


@dataclass(frozen=True)
class TradeRow:
    """One rendered transaction. All fields are display strings."""

    time: str
    sig: str
    exec: str
    route: str
    direction: str
    sol_change: str
    token_change: str
    est_px_sol: str

    def to_dict(self) -> dict[str, str]:
        """Columns in fixed display order, keyed by their table header."""
        return dict(
            zip(
                ROW_COLUMNS,
                (
                    self.time,
                    self.sig,
                    self.exec,
                    self.route,
                    self.direction,
                    self.sol_change,
                    self.token_change,
                    self.est_px_sol,
                ),
            )
        )


@dataclass
class TradeHistory:
    rows: list[TradeRow] = field(default_factory=list)
    processed: int = 0
    """Transactions classified, including those past the display cap."""


def direction_text(token_net: int) -> str:
    if token_net > 0:
        return DIRECTION_BUY
    if token_net < 0:
        return DIRECTION_SELL
    return DIRECTION_NEUTRAL


def token_decimals_for(tx: TransactionRecord, mint: str) -> int:
    """
    Decimal scale for mint in tx. Always DEFAULT_TOKEN_DECIMALS.

    The first matching transfer's tokenStandard is read but does not change
    the scale (no mint registry lookup); a non-fungible standard is only
    logged, since changing the scale would change previously produced output.
    """
    standard = next((t.token_standard for t in tx.token_transfers if t.mint == mint), None)
    if standard is not None and standard.lower() != "fungible":
        logger.debug(
            "token_decimals_assumed",
            mint=short_address(mint),
            token_standard=standard,
            decimals=DEFAULT_TOKEN_DECIMALS,
        )
    return DEFAULT_TOKEN_DECIMALS


def format_time(ts: int) -> str:
    """UTC 'YYYY-MM-DDTHH:MM:SS'; empty for timestamps datetime cannot represent."""
    try:
        return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    except (OverflowError, OSError, ValueError):
        return ""


def format_signature(signature: str) -> str:
    return signature[:SIGNATURE_PREVIEW_LEN] + "…"


def format_sol(lamports: int) -> str:
    """Exact SOL amount with 9 fractional digits, e.g. -500000000 -> '-0.500000000'."""
    return f"{Decimal(lamports).scaleb(-SOL_DECIMALS):.{SOL_DECIMALS}f}"


def format_token(raw: int, decimals: int) -> str:
    """Plain decimal without exponent or trailing zeros, e.g. 1500000 @6 -> '1.5'."""
    value = Decimal(raw).scaleb(-decimals).normalize()
    return f"{value:f}"


def format_price(price: float | None) -> str:
    return "" if price is None else f"{price:.9f}"


def build_row(tx: TransactionRecord, owner: str, target_mint: str = "") -> TradeRow:
    """Classify one transaction and net its flows for owner."""
    kind, route = classify_execution(tx)
    sol_net = net_delta(tx.native_legs(), owner)

    if target_mint:
        tk_net = net_delta(tx.token_legs(), owner, mint_filter(target_mint))
        decimals = token_decimals_for(tx, target_mint)
        price = implied_price(sol_net, tk_net, decimals)
        token_change = format_token(tk_net, decimals)
        direction = direction_text(tk_net)
    else:
        tk_net = 0
        price = None
        token_change = ""
        direction = ""

    logger.debug(
        "trade_row_built",
        signature=tx.signature[:16],
        exec=kind.value,
        route=route,
        sol_net=sol_net,
        token_net=tk_net,
    )
    return TradeRow(
        time=format_time(tx.timestamp),
        sig=format_signature(tx.signature),
        exec=kind.value,
        route=route,
        direction=direction,
        sol_change=format_sol(sol_net),
        token_change=token_change,
        est_px_sol=format_price(price),
    )


def iter_transactions(
    fetch_page: FetchPage,
    owner: str,
    limit: int = DEFAULT_LIMIT,
) -> Iterator[TransactionRecord]:
    """
    Yield transactions newest first until `limit` have been fetched or a page comes back empty.

    Each page asks for min(100, remaining). A page larger than requested is
    yielded whole. Fetch errors propagate.
    """
    before: str | None = None
    fetched = 0
    while fetched < limit:
        take = min(MAX_PAGE_SIZE, limit - fetched)
        page = fetch_page(owner, before, take)
        if not page:
            break
        logger.info(
            "trade_pipeline_page",
            wallet=short_address(owner),
            before=before[:16] if before else None,
            requested=take,
            count=len(page),
        )
        yield from page
        before = page[-1].signature
        fetched += len(page)


def run_trade_history(
    fetch_page: FetchPage,
    owner: str,
    target_mint: str = "",
    limit: int = DEFAULT_LIMIT,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> TradeHistory:
    """
    Build one row per fetched transaction; keep the first max_rows.

    target_mint empty disables direction, token change and price columns.
    """
    history = TradeHistory()
    for tx in iter_transactions(fetch_page, owner, limit):
        row = build_row(tx, owner, target_mint)
        history.processed += 1
        if len(history.rows) < max_rows:
            history.rows.append(row)

    logger.info(
        "trade_pipeline_done",
        wallet=short_address(owner),
        mint=target_mint or None,
        processed=history.processed,
        rows=len(history.rows),
    )
    return history


def rows_as_records(rows: list[TradeRow]) -> list[dict[str, Any]]:
    return [r.to_dict() for r in rows]
