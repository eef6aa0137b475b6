"""Wallet and mint address validation."""

from solders.pubkey import Pubkey


def is_valid_wallet(w: str) -> bool:
    """Return True if w parses as a Solana public key (wallets and mints share the format)."""
    try:
        Pubkey.from_string(w.strip())
        return True
    except Exception:
        return False


def short_address(addr: str, size: int = 16) -> str:
    """Truncate an address for log output."""
    return addr[:size] + "..." if len(addr) > size else addr
