"""Full-precision multiply-then-divide on 256-bit values."""

from __future__ import annotations

from .common import MAX_U256, Q96, MathError, MathErrorKind


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a*b/denominator); raises if the result overflows 256 bits or denominator is 0."""
    product = a * b
    if denominator <= product >> 256:
        if denominator == 0:
            raise MathError(MathErrorKind.DENOMINATOR_IS_ZERO)
        raise MathError(MathErrorKind.DENOMINATOR_IS_LTE_PROD_ONE)
    return product // denominator


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """ceil(a*b/denominator); raises if the result overflows 256 bits or denominator is 0."""
    result = mul_div(a, b, denominator)
    if (a * b) % denominator == 0:
        return result
    if result == MAX_U256:
        raise MathError(MathErrorKind.RESULT_IS_U256_MAX)
    return result + 1


def mul_div_96(a: int, b: int) -> int:
    """floor(a*b / 2**96) with full precision."""
    product = a * b
    if product >> 256 >= Q96:
        raise MathError(MathErrorKind.DENOMINATOR_IS_LTE_PROD_ONE)
    return product >> 96