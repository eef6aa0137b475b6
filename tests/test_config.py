"""
Pytest tests for run settings: API key lookup, limit parsing, address validation.
"""

from __future__ import annotations

import pytest

from wallet_trades.config import get_settings
from wallet_trades.config.settings import DEFAULT_LIMIT, parse_limit
from wallet_trades.core.exceptions import ConfigError

VALID_WALLET = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def test_defaults(helius_env):
    s = get_settings(VALID_WALLET)
    assert s.api_key == "test-key"
    assert s.wallet == VALID_WALLET
    assert s.mint == ""
    assert s.limit == 400
    assert s.max_rows == 50
    assert s.base_url == "https://api.helius.xyz"
    assert s.timeout_sec == 30.0


def test_overrides_from_args_and_env(helius_env, monkeypatch):
    monkeypatch.setenv("HELIUS_API_URL", "https://example.test/")
    monkeypatch.setenv("HELIUS_TIMEOUT_SEC", "7.5")
    monkeypatch.setenv("TRADES_MAX_ROWS", "20")
    s = get_settings(f"  {VALID_WALLET} ", USDC_MINT, "120")
    assert s.wallet == VALID_WALLET
    assert s.mint == USDC_MINT
    assert s.limit == 120
    assert s.max_rows == 20
    assert s.base_url == "https://example.test"
    assert s.timeout_sec == 7.5

    assert get_settings(VALID_WALLET, max_rows=5).max_rows == 5


def test_api_key_fallback_variable(helius_env, monkeypatch):
    monkeypatch.delenv("HELIUS_KEY", raising=False)
    monkeypatch.setenv("HELIUS_API_KEY", "fallback-key")
    assert get_settings(VALID_WALLET).api_key == "fallback-key"


def test_missing_api_key(helius_env, monkeypatch):
    monkeypatch.delenv("HELIUS_KEY", raising=False)
    with pytest.raises(ConfigError):
        get_settings(VALID_WALLET)


def test_api_key_not_in_repr(helius_env):
    assert "test-key" not in repr(get_settings(VALID_WALLET))


def test_invalid_addresses(helius_env):
    with pytest.raises(ConfigError):
        get_settings("not-a-wallet")
    with pytest.raises(ConfigError):
        get_settings(VALID_WALLET, "bad-mint")
    with pytest.raises(ConfigError):
        get_settings(VALID_WALLET, max_rows=0)


def test_parse_limit():
    """Unparsable or negative limits fall back to the default, like the original CLI."""
    assert parse_limit(None) == DEFAULT_LIMIT
    assert parse_limit("abc") == DEFAULT_LIMIT
    assert parse_limit("-3") == DEFAULT_LIMIT
    assert parse_limit("250") == 250
    assert parse_limit(0) == 0


def test_defaults_shared_across_layers():
    """Pipeline, fetcher and settings defaults all come from config.env."""
    import inspect

    from wallet_trades.analytics.trade_pipeline import iter_transactions, run_trade_history
    from wallet_trades.config import env
    from wallet_trades.config.settings import TradeHistorySettings
    from wallet_trades.solana_listener.fetcher import HeliusHistoryClient

    run_params = inspect.signature(run_trade_history).parameters
    assert run_params["limit"].default == env.DEFAULT_LIMIT
    assert run_params["max_rows"].default == env.DEFAULT_MAX_ROWS
    assert inspect.signature(iter_transactions).parameters["limit"].default == env.DEFAULT_LIMIT

    client_params = inspect.signature(HeliusHistoryClient.__init__).parameters
    assert client_params["base_url"].default == env.DEFAULT_HELIUS_API_URL
    assert client_params["timeout"].default == env.DEFAULT_TIMEOUT_SEC

    s = TradeHistorySettings(api_key="k", wallet=VALID_WALLET)
    assert (s.limit, s.max_rows, s.base_url, s.timeout_sec) == (
        env.DEFAULT_LIMIT,
        env.DEFAULT_MAX_ROWS,
        env.DEFAULT_HELIUS_API_URL,
        env.DEFAULT_TIMEOUT_SEC,
    )
    assert DEFAULT_LIMIT is env.DEFAULT_LIMIT
