"""Maximum liquidity obtainable from token amounts over a price range."""

from __future__ import annotations

from .common import Q96


def _ordered(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> tuple[int, int]:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        return sqrt_ratio_b_x96, sqrt_ratio_a_x96
    return sqrt_ratio_a_x96, sqrt_ratio_b_x96


def max_liquidity_for_amount0_imprecise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Liquidity for ``amount0``, matching the periphery router's imprecise formula.

    The intermediate product of the two prices is divided by 2**96 before it is
    used, which loses precision compared with the exact formula.
    """
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    intermediate = (lower * upper) >> 96
    return amount0 * intermediate // (upper - lower)


def max_liquidity_for_amount0_precise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Liquidity for ``amount0`` computed at full precision."""
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    numerator = amount0 * lower * upper
    denominator = (upper - lower) * Q96
    return numerator // denominator


def max_liquidity_for_amount1(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount1: int
) -> int:
    """Liquidity for ``amount1`` between two sqrt prices."""
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return (amount1 << 96) // (upper - lower)


def max_liquidity_for_amounts(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int,
    use_full_precision: bool,
) -> int:
    """Maximum liquidity for the given amounts of both tokens at the current price.

    With ``use_full_precision`` false the token0 side is computed the way the
    periphery router does, rather than as precisely as the core allows.
    """
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    for_amount0 = (
        max_liquidity_for_amount0_precise
        if use_full_precision
        else max_liquidity_for_amount0_imprecise
    )

    if sqrt_ratio_current_x96 <= lower:
        return for_amount0(lower, upper, amount0)
    if sqrt_ratio_current_x96 < upper:
        liquidity0 = for_amount0(sqrt_ratio_current_x96, upper, amount0)
        liquidity1 = max_liquidity_for_amount1(lower, sqrt_ratio_current_x96, amount1)
        return min(liquidity0, liquidity1)
    return max_liquidity_for_amount1(lower, upper, amount1)