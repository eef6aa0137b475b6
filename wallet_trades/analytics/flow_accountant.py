"""
Flow accountant: signed net change of one asset for one owner across transfer legs.

Exact integer arithmetic on base units. Python ints do not overflow, so
summing many near-u64 amounts is safe.
"""

from __future__ import annotations

from typing import Callable, Iterable

from wallet_trades.solana_listener.models import TransferLeg, parse_base_units

LegFilter = Callable[[TransferLeg], bool]


def mint_filter(mint: str) -> LegFilter:
    """Select only legs whose asset tag equals mint."""
    return lambda leg: leg.tag == mint


def net_delta(
    legs: Iterable[TransferLeg] | None,
    owner: str,
    asset_filter: LegFilter | None = None,
) -> int:
    """
    Sum inflows minus outflows of owner over legs.

    A leg from owner subtracts, a leg to owner adds; a self-transfer does
    both and nets to 0. Unparsable or missing amounts count as 0.
    """
    total = 0
    for leg in legs or ():
        if asset_filter is not None and not asset_filter(leg):
            continue
        amount = parse_base_units(leg.amount)
        if leg.from_account == owner:
            total -= amount
        if leg.to_account == owner:
            total += amount
    return total
