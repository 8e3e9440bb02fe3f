"""Fee growth inside a tick range and the fees owed to a position."""

from __future__ import annotations

from dataclasses import dataclass

from .common import Q128, wrap_u256


@dataclass(frozen=True)
class FeeGrowthOutside:
    """Fee growth recorded on the far side of a tick, per token, as Q128.128."""

    fee_growth_outside0_x128: int = 0
    fee_growth_outside1_x128: int = 0


def get_fee_growth_inside(
    lower: FeeGrowthOutside,
    upper: FeeGrowthOutside,
    tick_lower: int,
    tick_upper: int,
    tick_current: int,
    fee_growth_global0_x128: int,
    fee_growth_global1_x128: int,
) -> tuple[int, int]:
    """Fee growth per unit of liquidity inside [tick_lower, tick_upper), wrapping mod 2**256."""
    if tick_current < tick_lower:
        inside0 = lower.fee_growth_outside0_x128 - upper.fee_growth_outside0_x128
        inside1 = lower.fee_growth_outside1_x128 - upper.fee_growth_outside1_x128
    elif tick_current >= tick_upper:
        inside0 = upper.fee_growth_outside0_x128 - lower.fee_growth_outside0_x128
        inside1 = upper.fee_growth_outside1_x128 - lower.fee_growth_outside1_x128
    else:
        inside0 = (
            fee_growth_global0_x128
            - lower.fee_growth_outside0_x128
            - upper.fee_growth_outside0_x128
        )
        inside1 = (
            fee_growth_global1_x128
            - lower.fee_growth_outside1_x128
            - upper.fee_growth_outside1_x128
        )
    return wrap_u256(inside0), wrap_u256(inside1)


def get_tokens_owed(
    fee_growth_inside_0_last_x128: int,
    fee_growth_inside_1_last_x128: int,
    liquidity: int,
    fee_growth_inside_0_x128: int,
    fee_growth_inside_1_x128: int,
) -> tuple[int, int]:
    """Amounts of token0 and token1 owed to a position as fees."""

    def owed(current: int, last: int) -> int:
        return wrap_u256(wrap_u256(current - last) * liquidity) // Q128

    return (
        owed(fee_growth_inside_0_x128, fee_growth_inside_0_last_x128),
        owed(fee_growth_inside_1_x128, fee_growth_inside_1_last_x128),
    )