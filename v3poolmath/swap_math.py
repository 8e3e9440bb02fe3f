"""A single step of a swap within one tick range."""

from __future__ import annotations

from .common import MAX_I256, MIN_I256, wrap_u256
from .full_math import mul_div, mul_div_rounding_up
from .sqrt_price_math import (
    get_amount_0_delta,
    get_amount_1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)

_MAX_FEE = 1_000_000


def compute_swap_step(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_target_x96: int,
    liquidity: int,
    amount_remaining: int,
    fee_pips: int,
) -> tuple[int, int, int, int]:
    """Swap as much of ``amount_remaining`` as the range allows.

    A non-negative ``amount_remaining`` is an exact input, a negative one an exact
    output. Returns ``(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)``.
    """
    if not MIN_I256 <= amount_remaining <= MAX_I256:
        raise ValueError(f"amount remaining out of int256 range: {amount_remaining}")
    fee_complement = wrap_u256(_MAX_FEE - fee_pips)
    zero_for_one = sqrt_ratio_current_x96 >= sqrt_ratio_target_x96

    if amount_remaining >= 0:
        remaining = amount_remaining
        remaining_less_fee = mul_div(remaining, fee_complement, _MAX_FEE)
        if zero_for_one:
            amount_in = get_amount_0_delta(
                sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, True
            )
        else:
            amount_in = get_amount_1_delta(
                sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, True
            )

        if remaining_less_fee >= amount_in:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
            fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
        else:
            amount_in = remaining_less_fee
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_input(
                sqrt_ratio_current_x96, liquidity, amount_in, zero_for_one
            )
            fee_amount = wrap_u256(remaining - amount_in)

        if zero_for_one:
            amount_out = get_amount_1_delta(
                sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, False
            )
        else:
            amount_out = get_amount_0_delta(
                sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, False
            )
        return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount

    remaining = wrap_u256(-amount_remaining)
    if zero_for_one:
        amount_out = get_amount_1_delta(
            sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, False
        )
    else:
        amount_out = get_amount_0_delta(
            sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, False
        )

    if remaining >= amount_out:
        sqrt_ratio_next_x96 = sqrt_ratio_target_x96
    else:
        amount_out = remaining
        sqrt_ratio_next_x96 = get_next_sqrt_price_from_output(
            sqrt_ratio_current_x96, liquidity, amount_out, zero_for_one
        )

    if zero_for_one:
        amount_in = get_amount_0_delta(
            sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, True
        )
    else:
        amount_in = get_amount_1_delta(
            sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, True
        )
    fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
    return sqrt_ratio_next_x96, amount_in, amount_out, fee_amount