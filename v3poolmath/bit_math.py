"""Positions of the most and least significant set bits of a 256-bit word."""

from __future__ import annotations

from .common import MAX_U256


def _check(x: int) -> None:
    if x == 0:
        raise ValueError("ZERO")
    if not 0 < x <= MAX_U256:
        raise ValueError(f"value out of uint256 range: {x}")


def most_significant_bit(x: int) -> int:
    """Index of the highest set bit of a nonzero 256-bit value."""
    _check(x)
    return x.bit_length() - 1


def least_significant_bit(x: int) -> int:
    """Index of the lowest set bit of a nonzero 256-bit value."""
    _check(x)
    return (x & -x).bit_length() - 1