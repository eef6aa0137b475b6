"""Implied SOL-per-token price from the two net flows of a transaction."""

from __future__ import annotations

import math

LAMPORTS_PER_SOL = 1_000_000_000
SOL_DECIMALS = 9


def implied_price(native_net: int, token_net: int, token_decimals: int) -> float | None:
    """
    |native_net| SOL divided by |token_net| tokens, both scaled to whole units.

    None when either flow is zero, the scaled token amount underflows to 0.0,
    or the result does not fit a finite float. Sign is dropped; direction is
    reported separately.
    """
    if native_net == 0 or token_net == 0:
        return None
    try:
        sol_abs = abs(native_net) / LAMPORTS_PER_SOL
        tok_abs = abs(token_net) / 10 ** token_decimals
        if tok_abs == 0.0:
            return None
        price = sol_abs / tok_abs
    except OverflowError:
        return None
    return price if math.isfinite(price) else None
