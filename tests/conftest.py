"""
Pytest fixtures for wallet_trades tests. No network: the Helius client is
always mocked or replaced by an in-memory page source.
"""

from __future__ import annotations

import pytest

from wallet_trades.trades_logging import configure_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Rebind structlog to the current stderr so no test inherits a stream closed by another test's capsys."""
    configure_logging()
    yield


@pytest.fixture
def helius_env(monkeypatch):
    """Set a fake Helius key and clear optional overrides so defaults apply."""
    monkeypatch.setenv("HELIUS_KEY", "test-key")
    monkeypatch.delenv("HELIUS_API_KEY", raising=False)
    monkeypatch.delenv("HELIUS_API_URL", raising=False)
    monkeypatch.delenv("HELIUS_TIMEOUT_SEC", raising=False)
    monkeypatch.delenv("TRADES_MAX_ROWS", raising=False)


class PageSource:
    """In-memory fetch_page: returns queued pages in order and records each call."""

    def __init__(self, pages):
        self.pages = list(pages)
        self.calls = []

    def __call__(self, owner, before, page_size):
        self.calls.append((owner, before, page_size))
        if not self.pages:
            return []
        return self.pages.pop(0)


@pytest.fixture
def page_source():
    return PageSource
