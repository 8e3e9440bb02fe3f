"""Exact integer math for concentrated-liquidity AMM pools."""

__version__ = "0.1.0"

__all__ = [
    "bit_math",
    "common",
    "fee_growth",
    "full_math",
    "liquidity_math",
    "max_liquidity",
    "nearest_usable_tick",
    "sqrt_price_math",
    "sqrt_ratio",
    "swap_math",
    "tick_list",
    "tick_math",
]