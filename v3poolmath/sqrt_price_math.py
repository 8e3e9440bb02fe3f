"""Price movement and token amount deltas for Q64.96 square-root prices."""

from __future__ import annotations

from .common import (
    MAX_I128,
    MAX_U160,
    MIN_I128,
    Q96,
    MathError,
    MathErrorKind,
    to_i256,
    wrap_u256,
)
from .full_math import mul_div, mul_div_96, mul_div_rounding_up


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _to_uint160(x: int) -> int:
    if x > MAX_U160:
        raise MathError(MathErrorKind.SAFE_CAST_TO_U160_OVERFLOW)
    return x


def get_next_sqrt_price_from_amount_0_rounding_up(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Next sqrt price after adding or removing ``amount`` of token0, rounded up."""
    if amount == 0:
        return sqrt_price_x96
    numerator_1 = liquidity << 96
    product = amount * sqrt_price_x96
    fits = product >> 256 == 0

    if add:
        if fits:
            denominator = numerator_1 + product
            if denominator >> 256 == 0:
                return mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator)
        return _ceil_div(
            numerator_1, wrap_u256(numerator_1 // sqrt_price_x96 + amount)
        )

    if not (fits and numerator_1 > product):
        raise MathError(MathErrorKind.PRODUCT_DIV_AMOUNT)
    denominator = numerator_1 - product
    return _to_uint160(mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator))


def get_next_sqrt_price_from_amount_1_rounding_down(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Next sqrt price after adding or removing ``amount`` of token1, rounded down."""
    if add:
        if amount <= MAX_U160:
            quotient = (amount << 96) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        return _to_uint160(wrap_u256(sqrt_price_x96 + quotient))

    if amount <= MAX_U160:
        quotient = _ceil_div(amount << 96, liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if sqrt_price_x96 > quotient:
        return sqrt_price_x96 - quotient
    raise MathError(MathErrorKind.SQRT_PRICE_IS_LTE_QUOTIENT)


def _check_price_and_liquidity(sqrt_price_x96: int, liquidity: int) -> None:
    if sqrt_price_x96 == 0:
        raise MathError(MathErrorKind.SQRT_PRICE_IS_ZERO)
    if liquidity == 0:
        raise MathError(MathErrorKind.LIQUIDITY_IS_ZERO)


def get_next_sqrt_price_from_input(
    sqrt_price_x96: int, liquidity: int, amount_in: int, zero_for_one: bool
) -> int:
    """Sqrt price after swapping ``amount_in`` of token0 (zero_for_one) or token1 in."""
    _check_price_and_liquidity(sqrt_price_x96, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x96, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x96, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(
    sqrt_price_x96: int, liquidity: int, amount_out: int, zero_for_one: bool
) -> int:
    """Sqrt price after swapping ``amount_out`` of token1 (zero_for_one) or token0 out."""
    _check_price_and_liquidity(sqrt_price_x96, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x96, liquidity, amount_out, False
    )


def get_amount_0_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Amount of token0 covering ``liquidity`` between two sqrt prices."""
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    numerator_1 = liquidity << 96
    numerator_2 = upper - lower
    if lower == 0:
        raise MathError(MathErrorKind.SQRT_PRICE_IS_ZERO)

    amount_0, rem = divmod(mul_div(numerator_1, numerator_2, upper), lower)
    carry = round_up and (rem != 0 or (numerator_1 * numerator_2) % upper != 0)
    return wrap_u256(amount_0 + int(carry))


def get_amount_1_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Amount of token1 covering ``liquidity`` between two sqrt prices."""
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    numerator = upper - lower
    amount_1 = mul_div_96(liquidity, numerator)
    carry = round_up and (liquidity * numerator) % Q96 != 0
    return wrap_u256(amount_1 + int(carry))


def _signed_delta(delta, sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int) -> int:
    if not MIN_I128 <= liquidity <= MAX_I128:
        raise ValueError(f"liquidity out of int128 range: {liquidity}")
    positive = liquidity >= 0
    amount = delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, abs(liquidity), positive)
    return to_i256(amount if positive else wrap_u256(-amount))


def get_amount_0_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Signed token0 delta for a signed liquidity change; adds round up, removals down."""
    return _signed_delta(get_amount_0_delta, sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity)


def get_amount_1_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Signed token1 delta for a signed liquidity change; adds round up, removals down."""
    return _signed_delta(get_amount_1_delta, sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity)