"""
CLI tests: table rendering, CSV export, and error exit codes. Helius client is patched.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pandas as pd

from wallet_trades.core.exceptions import FetchError
from wallet_trades.solana_listener.models import TransactionRecord
from wallet_trades.tools.trade_history import main, render_table

VALID_WALLET = "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
VALID_SIG = "5VERv8NMvzbJMEkV8xnrLkEaWRtSz9CosKDYjCJjBRnbJLgp8uirBgmQpjKhoR4tjF3ZpRzrFmBV6UjKdiSZkQUW"


def _swap_tx():
    return TransactionRecord.from_api_item(
        {
            "signature": VALID_SIG,
            "timestamp": 1_700_000_000,
            "nativeTransfers": [{"fromUserAccount": VALID_WALLET, "toUserAccount": "pool", "amount": "2000000000"}],
            "tokenTransfers": [
                {"fromUserAccount": "pool", "toUserAccount": VALID_WALLET, "tokenAmount": "1000000", "mint": USDC_MINT}
            ],
            "events": {"swap": [{"source": "JUPITER"}]},
        }
    )


def _mock_client(pages):
    client = MagicMock()
    client.__enter__.return_value = client
    client.fetch_page.side_effect = pages
    return client


def test_render_table_empty():
    assert render_table([]) == "no transactions"


def test_cli_prints_table(helius_env, capsys):
    client = _mock_client([[_swap_tx()], []])
    with patch("wallet_trades.tools.trade_history.HeliusHistoryClient", return_value=client) as cls:
        code = main([VALID_WALLET, USDC_MINT, "10"])

    assert code == 0
    cls.assert_called_once_with("test-key", "https://api.helius.xyz", timeout=30.0)
    client.fetch_page.assert_any_call(VALID_WALLET, None, 10)
    out = capsys.readouterr().out
    assert "est_px_SOL" in out
    assert "5VERv8NMvz…" in out
    assert "SWAP" in out
    assert "JUPITER" in out
    assert "BUY" in out
    assert "-2.000000000" in out
    assert "2.000000000" in out


def test_cli_writes_csv(helius_env, tmp_path):
    out_path = tmp_path / "trades.csv"
    client = _mock_client([[_swap_tx()], []])
    with patch("wallet_trades.tools.trade_history.HeliusHistoryClient", return_value=client):
        code = main([VALID_WALLET, USDC_MINT, "--csv", str(out_path)])

    assert code == 0
    df = pd.read_csv(out_path, dtype=str, keep_default_na=False)
    assert list(df.columns) == ["time", "sig", "exec", "route", "direction", "sol_change", "token_change", "est_px_SOL"]
    assert df.iloc[0]["direction"] == "BUY"
    assert df.iloc[0]["sol_change"] == "-2.000000000"


def test_cli_fetch_error_exit_code(helius_env, capsys):
    client = _mock_client(FetchError("Helius 429", status_code=429))
    with patch("wallet_trades.tools.trade_history.HeliusHistoryClient", return_value=client):
        code = main([VALID_WALLET])

    assert code == 1
    captured = capsys.readouterr()
    assert "error: Helius 429" in captured.err
    assert captured.out == ""


def test_cli_missing_key_exit_code(helius_env, monkeypatch, capsys):
    monkeypatch.delenv("HELIUS_KEY", raising=False)
    assert main([VALID_WALLET]) == 1
    assert "HELIUS_KEY" in capsys.readouterr().err


def test_cli_unwritable_csv_exit_code(helius_env, tmp_path, capsys):
    """A CSV path that cannot be opened reports one error line after the table."""
    out_path = tmp_path / "missing_dir" / "trades.csv"
    client = _mock_client([[_swap_tx()], []])
    with patch("wallet_trades.tools.trade_history.HeliusHistoryClient", return_value=client):
        code = main([VALID_WALLET, USDC_MINT, "--csv", str(out_path)])

    assert code == 1
    captured = capsys.readouterr()
    assert "est_px_SOL" in captured.out
    assert captured.err.startswith("error: cannot write")
    assert "Traceback" not in captured.err
    assert not out_path.exists()
