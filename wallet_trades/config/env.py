"""
Environment variable loading for wallet_trades.

- HELIUS_KEY: Helius API key (HELIUS_API_KEY accepted as fallback)
- HELIUS_API_URL: base URL of the enhanced transactions API (default: https://api.helius.xyz)
- HELIUS_TIMEOUT_SEC: per-request timeout in seconds (default: 30)
- TRADES_MAX_ROWS: how many rows to display (default: 50)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from wallet_trades.core.exceptions import ConfigError

# Project root: config is wallet_trades/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_HELIUS_API_URL = "https://api.helius.xyz"
DEFAULT_TIMEOUT_SEC = 30.0
DEFAULT_MAX_ROWS = 50
DEFAULT_LIMIT = 400


def load_trades_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides set vars."""
    load_dotenv(_ENV_PATH)


def get_helius_api_key() -> str:
    """
    Return the Helius API key.
    Order: HELIUS_KEY > HELIUS_API_KEY. Raises ConfigError when neither is set.
    """
    load_trades_env()
    key = (os.getenv("HELIUS_KEY") or os.getenv("HELIUS_API_KEY") or "").strip()
    if not key:
        raise ConfigError("missing HELIUS_KEY environment variable")
    return key


def get_helius_base_url() -> str:
    load_trades_env()
    url = (os.getenv("HELIUS_API_URL") or "").strip()
    return (url or DEFAULT_HELIUS_API_URL).rstrip("/")


def get_request_timeout() -> float:
    """HELIUS_TIMEOUT_SEC as float; falls back to the default when unset or unparsable."""
    load_trades_env()
    raw = (os.getenv("HELIUS_TIMEOUT_SEC") or "").strip()
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_TIMEOUT_SEC


def get_default_max_rows() -> int:
    load_trades_env()
    raw = (os.getenv("TRADES_MAX_ROWS") or "").strip()
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    return DEFAULT_MAX_ROWS
