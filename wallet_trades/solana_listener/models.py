"""
Data models for enhanced transaction records.

Mirrors the camelCase JSON returned by the Helius enhanced transactions API.
Every field upstream is optional and shapes vary, so construction is total:
anything missing or of the wrong type becomes an empty default (empty tuple,
empty Events, None) instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, NamedTuple, Optional

# Amounts above the signed 128-bit range are treated as unparsable.
MAX_BASE_UNITS = 2**127 - 1
_MAX_BASE_UNITS_DIGITS = len(str(MAX_BASE_UNITS))


def parse_base_units(raw: Any) -> int:
    """
    Parse a base-unit amount (lamports or raw token units) to int.

    Accepts non-negative ints and digit strings with an optional leading '+',
    up to MAX_BASE_UNITS. Anything else (None, negatives, out-of-range values,
    floats, bools, junk) is 0, never an error.
    """
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if 0 <= raw <= MAX_BASE_UNITS else 0
    if not isinstance(raw, str):
        return 0
    digits = raw[1:] if raw.startswith("+") else raw
    if not digits.isascii() or not digits.isdigit():
        return 0
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_BASE_UNITS_DIGITS:
        return 0
    value = int(digits)
    return value if value <= MAX_BASE_UNITS else 0


def _opt_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


class TransferLeg(NamedTuple):
    """Uniform view of a native or token transfer for flow accounting."""

    from_account: str | None
    to_account: str | None
    amount: Any  # raw upstream value; parsed by parse_base_units at accounting time
    tag: str | None  # mint for token legs, None for native


@dataclass(frozen=True)
class NativeTransfer:
    from_account: str | None = None
    to_account: str | None = None
    amount: Any = None

    @classmethod
    def from_api_item(cls, item: Any) -> "NativeTransfer":
        d = _as_dict(item)
        return cls(
            from_account=_opt_str(d.get("fromUserAccount")),
            to_account=_opt_str(d.get("toUserAccount")),
            amount=d.get("amount"),
        )

    def leg(self) -> TransferLeg:
        return TransferLeg(self.from_account, self.to_account, self.amount, None)


@dataclass(frozen=True)
class TokenTransfer:
    from_account: str | None = None
    to_account: str | None = None
    token_amount: Any = None
    mint: str | None = None
    token_standard: str | None = None

    @classmethod
    def from_api_item(cls, item: Any) -> "TokenTransfer":
        d = _as_dict(item)
        return cls(
            from_account=_opt_str(d.get("fromUserAccount")),
            to_account=_opt_str(d.get("toUserAccount")),
            token_amount=d.get("tokenAmount"),
            mint=_opt_str(d.get("mint")),
            token_standard=_opt_str(d.get("tokenStandard")),
        )

    def leg(self) -> TransferLeg:
        return TransferLeg(self.from_account, self.to_account, self.token_amount, self.mint)


@dataclass(frozen=True)
class ProgramInfo:
    """Grab-bag of venue name fields; any subset may be populated."""

    source: str | None = None
    name: str | None = None
    market: str | None = None

    @classmethod
    def from_api_item(cls, item: Any) -> "ProgramInfo":
        d = _as_dict(item)
        return cls(
            source=_opt_str(d.get("source")),
            name=_opt_str(d.get("name")),
            market=_opt_str(d.get("market")),
        )


@dataclass(frozen=True)
class SwapEvent:
    source: str | None = None
    liquidity_source: str | None = None
    program_info: ProgramInfo = field(default_factory=ProgramInfo)

    @classmethod
    def from_api_item(cls, item: Any) -> "SwapEvent":
        d = _as_dict(item)
        return cls(
            source=_opt_str(d.get("source")),
            liquidity_source=_opt_str(d.get("liquiditySource")),
            program_info=ProgramInfo.from_api_item(d.get("programInfo")),
        )


@dataclass(frozen=True)
class DexEvent:
    market: str | None = None
    program_info: ProgramInfo = field(default_factory=ProgramInfo)

    @classmethod
    def from_api_item(cls, item: Any) -> "DexEvent":
        d = _as_dict(item)
        return cls(
            market=_opt_str(d.get("market")),
            program_info=ProgramInfo.from_api_item(d.get("programInfo")),
        )


@dataclass(frozen=True)
class Events:
    swap: tuple[SwapEvent, ...] = ()
    dex: tuple[DexEvent, ...] = ()

    @classmethod
    def from_api_item(cls, item: Any) -> "Events":
        d = _as_dict(item)
        return cls(
            swap=tuple(SwapEvent.from_api_item(s) for s in _as_list(d.get("swap"))),
            dex=tuple(DexEvent.from_api_item(x) for x in _as_list(d.get("dex"))),
        )


@dataclass(frozen=True)
class TransactionRecord:
    """
    One enhanced transaction from the history feed.

    transaction_error holds whatever the API sent (string or object); any
    non-null value means the transaction failed on-chain.
    """

    signature: str = ""
    timestamp: int = 0
    native_transfers: tuple[NativeTransfer, ...] = ()
    token_transfers: tuple[TokenTransfer, ...] = ()
    events: Events = field(default_factory=Events)
    logs: tuple[str, ...] = ()
    transaction_error: Any = None

    @property
    def failed(self) -> bool:
        return self.transaction_error is not None

    def native_legs(self) -> list[TransferLeg]:
        return [t.leg() for t in self.native_transfers]

    def token_legs(self) -> list[TransferLeg]:
        return [t.leg() for t in self.token_transfers]

    @classmethod
    def from_api_item(cls, item: Any) -> "TransactionRecord":
        """Build from a single element of the /v0/addresses/{owner}/transactions array."""
        d = _as_dict(item)
        ts = d.get("timestamp")
        return cls(
            signature=_opt_str(d.get("signature")) or "",
            timestamp=ts if isinstance(ts, int) and not isinstance(ts, bool) and ts >= 0 else 0,
            native_transfers=tuple(
                NativeTransfer.from_api_item(t) for t in _as_list(d.get("nativeTransfers"))
            ),
            token_transfers=tuple(
                TokenTransfer.from_api_item(t) for t in _as_list(d.get("tokenTransfers"))
            ),
            events=Events.from_api_item(d.get("events")),
            logs=tuple(line for line in _as_list(d.get("logs")) if isinstance(line, str)),
            transaction_error=d.get("transactionError"),
        )


# Signature of the inbound page fetcher: (owner, before, page_size) -> records
FetchPage = Callable[[str, Optional[str], int], "list[TransactionRecord]"]
