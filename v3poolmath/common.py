"""Shared constants, the math error type and 256-bit integer helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_U128 = (1 << 128) - 1
MAX_U160 = (1 << 160) - 1
MAX_U256 = (1 << 256) - 1
MIN_I128 = -(1 << 127)
MAX_I128 = (1 << 127) - 1
MIN_I256 = -(1 << 255)
MAX_I256 = (1 << 255) - 1

Q96 = 1 << 96
Q128 = 1 << 128
Q192 = 1 << 192


class MathErrorKind(Enum):
    """The ways a fixed-point pool computation can fail."""

    DENOMINATOR_IS_ZERO = "denominator is zero"
    DENOMINATOR_IS_LTE_PROD_ONE = "denominator is less than or equal to prod_1"
    RESULT_IS_U256_MAX = "result is U256::MAX"
    SAFE_CAST_TO_U160_OVERFLOW = "overflow when casting to U160"
    PRODUCT_DIV_AMOUNT = "product / amount != sqrt price or numerator <= product"
    SQRT_PRICE_IS_LTE_QUOTIENT = "sqrt price is less than or equal to quotient"
    SQRT_PRICE_IS_ZERO = "sqrt price is zero"
    LIQUIDITY_IS_ZERO = "liquidity is zero"
    LIQUIDITY_ADD = "LA"
    LIQUIDITY_SUB = "LS"
    T = "T"
    R = "R"


class MathError(ArithmeticError):
    """Raised when a pool computation cannot produce a valid result."""

    def __init__(self, kind: MathErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class MethodParameters:
    """Generated parameters for executing a call."""

    calldata: bytes = b""
    value: int = 0


def wrap_u256(value: int) -> int:
    """Reduce an integer modulo 2**256, as unsigned 256-bit arithmetic does."""
    return value & MAX_U256


def to_i256(value: int) -> int:
    """Interpret a raw unsigned 256-bit word as a two's-complement signed integer."""
    if not 0 <= value <= MAX_U256:
        raise ValueError(f"value out of uint256 range: {value}")
    return value - (1 << 256) if value > MAX_I256 else value


def from_i256(value: int) -> int:
    """Encode a signed 256-bit integer as its raw two's-complement word."""
    if not MIN_I256 <= value <= MAX_I256:
        raise ValueError(f"value out of int256 range: {value}")
    return value & MAX_U256