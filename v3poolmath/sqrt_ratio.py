"""Encoding a price ratio as a Q64.96 square root."""

from __future__ import annotations

import math

from .common import MAX_U256


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """Q64.96 square root of amount1/amount0."""
    numerator = amount1 << 192
    quotient = abs(numerator) // abs(amount0)
    if (numerator < 0) != (amount0 < 0):
        quotient = -quotient
    if quotient < 0:
        raise ValueError("cannot take the square root of a negative ratio")
    result = math.isqrt(quotient)
    if result > MAX_U256:
        raise OverflowError("sqrt ratio does not fit in 256 bits")
    return result