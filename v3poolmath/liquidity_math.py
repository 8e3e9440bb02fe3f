"""Adding a signed liquidity delta to an unsigned 128-bit liquidity."""

from __future__ import annotations

from .common import MAX_I128, MAX_U128, MIN_I128, MathError, MathErrorKind


def add_delta(x: int, y: int) -> int:
    """Add signed delta y to liquidity x, raising on 128-bit underflow or overflow."""
    if not 0 <= x <= MAX_U128:
        raise ValueError(f"liquidity out of uint128 range: {x}")
    if not MIN_I128 <= y <= MAX_I128:
        raise ValueError(f"delta out of int128 range: {y}")
    z = x + y
    if z < 0:
        raise MathError(MathErrorKind.LIQUIDITY_SUB)
    if z > MAX_U128:
        raise MathError(MathErrorKind.LIQUIDITY_ADD)
    return z