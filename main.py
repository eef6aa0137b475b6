"""
Main entrypoint: trade history for one wallet.

Same as `trade-history` / `python -m wallet_trades.tools.trade_history`:

  python main.py <WALLET> [MINT] [LIMIT]

Env: HELIUS_KEY (required), HELIUS_API_URL, HELIUS_TIMEOUT_SEC, TRADES_MAX_ROWS, LOG_LEVEL, LOG_FORMAT.
"""

from wallet_trades.tools.trade_history import main

if __name__ == "__main__":
    raise SystemExit(main())
