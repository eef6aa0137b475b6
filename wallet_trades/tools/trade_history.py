"""
Print a wallet's recent trading history as a table.

Usage:
  trade-history WALLET [MINT] [LIMIT] [--max-rows N] [--csv PATH]

Run:
  py -m wallet_trades.tools.trade_history 9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka
  py -m wallet_trades.tools.trade_history WALLET EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v 200 --csv trades.csv

Needs HELIUS_KEY (or HELIUS_API_KEY) in the environment or .env.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

from wallet_trades.analytics.trade_pipeline import ROW_COLUMNS, TradeRow, rows_as_records, run_trade_history
from wallet_trades.config import get_settings
from wallet_trades.core.exceptions import TradeHistoryError
from wallet_trades.solana_listener.fetcher import HeliusHistoryClient
from wallet_trades.trades_logging import bind_wallet

NO_ROWS_TEXT = "no transactions"


def rows_to_frame(rows: list[TradeRow]) -> pd.DataFrame:
    return pd.DataFrame(rows_as_records(rows), columns=list(ROW_COLUMNS))


def render_table(rows: list[TradeRow]) -> str:
    if not rows:
        return NO_ROWS_TEXT
    return rows_to_frame(rows).to_string(index=False)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="trade-history",
        description="Reconstruct SWAP/LIMIT trading history for a Solana wallet from Helius enhanced transactions.",
    )
    ap.add_argument("wallet", help="Wallet address to analyse")
    ap.add_argument("mint", nargs="?", default="", help="Token mint to track (enables direction, token change, price)")
    ap.add_argument("limit", nargs="?", default=None, help="Transactions to fetch and classify (default 400)")
    ap.add_argument("--max-rows", dest="max_rows", type=int, default=None, help="Rows to display (default 50)")
    ap.add_argument("--csv", dest="csv_path", type=Path, default=None, help="Also write the displayed rows to this CSV file")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings(args.wallet, args.mint, args.limit, args.max_rows)
        log = bind_wallet(settings.wallet)
        log.info("trade_history_start", mint=settings.mint or None, limit=settings.limit)
        with HeliusHistoryClient(
            settings.api_key,
            settings.base_url,
            timeout=settings.timeout_sec,
        ) as client:
            history = run_trade_history(
                client.fetch_page,
                settings.wallet,
                target_mint=settings.mint,
                limit=settings.limit,
                max_rows=settings.max_rows,
            )
    except TradeHistoryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(render_table(history.rows))
    if args.csv_path is not None:
        try:
            rows_to_frame(history.rows).to_csv(args.csv_path, index=False)
        except OSError as e:
            print(f"error: cannot write {args.csv_path}: {e}", file=sys.stderr)
            return 1
        log.info("trade_history_csv_written", path=str(args.csv_path), rows=len(history.rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
