"""
Helius enhanced transaction history fetcher.

One GET per page against /v0/addresses/{owner}/transactions, newest first.
The caller walks pages with the `before` cursor. Any failure (transport,
non-2xx status, body that is not a JSON array) raises FetchError; there is
no retry, a failed page aborts the run.
"""

from __future__ import annotations

from typing import Any

import requests

from wallet_trades.config.env import DEFAULT_HELIUS_API_URL, DEFAULT_TIMEOUT_SEC
from wallet_trades.core.exceptions import FetchError
from wallet_trades.solana_listener.models import TransactionRecord
from wallet_trades.trades_logging import get_logger
from wallet_trades.utils.wallet_utils import short_address

logger = get_logger(__name__)

MAX_PAGE_SIZE = 100
HELIUS_HISTORY_PATH = "/v0/addresses/{owner}/transactions"


class HeliusHistoryClient:
    """
    Paged reader of a wallet's enhanced transaction history.

    Holds one requests.Session; use as a context manager or call close().
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_HELIUS_API_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def __enter__(self) -> "HeliusHistoryClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch_page(
        self,
        owner: str,
        before: str | None = None,
        page_size: int = MAX_PAGE_SIZE,
    ) -> list[TransactionRecord]:
        """
        Fetch one page of transactions for owner, older than `before` when given.

        Returns records in API order (newest first). Empty list means no more data.
        """
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be in 1..{MAX_PAGE_SIZE}, got {page_size}")

        url = self._base_url + HELIUS_HISTORY_PATH.format(owner=owner)
        params: dict[str, Any] = {"api-key": self._api_key, "limit": page_size}
        if before:
            params["before"] = before

        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            logger.warning("helius_request_failed", wallet=short_address(owner), error=str(e))
            raise FetchError(f"Helius request failed: {e}") from e

        if not resp.ok:
            logger.warning("helius_request_failed", wallet=short_address(owner), status=resp.status_code)
            raise FetchError(f"Helius {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise FetchError("Helius returned a non-JSON body", status_code=resp.status_code) from e
        if not isinstance(data, list):
            raise FetchError("Helius returned JSON that is not an array", status_code=resp.status_code)

        records = [TransactionRecord.from_api_item(item) for item in data]
        logger.info(
            "helius_page_fetched",
            wallet=short_address(owner),
            before=before[:16] if before else None,
            count=len(records),
        )
        return records
