"""
Run settings for one trade history invocation.

Built once at startup from CLI arguments plus environment, then passed
explicitly to the fetcher and pipeline. Nothing downstream reads os.environ.
"""

from __future__ import annotations

from dataclasses import dataclass

from wallet_trades.config.env import (
    DEFAULT_HELIUS_API_URL,
    DEFAULT_LIMIT,
    DEFAULT_MAX_ROWS,
    DEFAULT_TIMEOUT_SEC,
    get_default_max_rows,
    get_helius_api_key,
    get_helius_base_url,
    get_request_timeout,
)
from wallet_trades.core.exceptions import ConfigError
from wallet_trades.utils.wallet_utils import is_valid_wallet


@dataclass(frozen=True)
class TradeHistorySettings:
    """Configuration for a single trade history run."""

    api_key: str
    wallet: str
    mint: str = ""
    limit: int = DEFAULT_LIMIT
    max_rows: int = DEFAULT_MAX_ROWS
    base_url: str = DEFAULT_HELIUS_API_URL
    timeout_sec: float = DEFAULT_TIMEOUT_SEC

    def __repr__(self) -> str:
        return (
            f"TradeHistorySettings(wallet={self.wallet!r}, mint={self.mint!r}, "
            f"limit={self.limit}, max_rows={self.max_rows}, base_url={self.base_url!r})"
        )


def parse_limit(raw: str | int | None) -> int:
    """Positive integer or DEFAULT_LIMIT; bad input falls back silently like the shell tool always did."""
    if raw is None:
        return DEFAULT_LIMIT
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    return value if value >= 0 else DEFAULT_LIMIT


def get_settings(
    wallet: str,
    mint: str = "",
    limit: str | int | None = None,
    max_rows: int | None = None,
) -> TradeHistorySettings:
    """
    Return validated settings for one run.

    Raises ConfigError when the API key is missing or wallet/mint are not
    valid Solana addresses. An empty mint disables token and price columns.
    """
    wallet = (wallet or "").strip()
    mint = (mint or "").strip()
    if not is_valid_wallet(wallet):
        raise ConfigError(f"invalid wallet address: {wallet!r}")
    if mint and not is_valid_wallet(mint):
        raise ConfigError(f"invalid mint address: {mint!r}")
    if max_rows is not None and max_rows <= 0:
        raise ConfigError(f"max rows must be positive, got {max_rows}")

    return TradeHistorySettings(
        api_key=get_helius_api_key(),
        wallet=wallet,
        mint=mint,
        limit=parse_limit(limit),
        max_rows=max_rows if max_rows is not None else get_default_max_rows(),
        base_url=get_helius_base_url(),
        timeout_sec=get_request_timeout(),
    )
