import pytest
from hypothesis import given
from hypothesis import strategies as st

from v3poolmath.common import (
    MAX_I256,
    MAX_U256,
    MIN_I256,
    MathError,
    MathErrorKind,
    MethodParameters,
    from_i256,
    to_i256,
    wrap_u256,
)


def test_wrap_u256_negative_one_is_max():
    assert wrap_u256(-1) == MAX_U256


def test_wrap_u256_overflow_wraps_to_zero():
    assert wrap_u256(MAX_U256 + 1) == 0


@given(st.integers(min_value=0, max_value=MAX_U256))
def test_wrap_u256_identity_in_range(x):
    assert wrap_u256(x) == x


def test_to_i256_max_word_is_minus_one():
    assert to_i256(MAX_U256) == -1


def test_to_i256_sign_boundary():
    assert to_i256(MAX_I256) == MAX_I256
    assert to_i256(MAX_I256 + 1) == MIN_I256


@given(st.integers(min_value=MIN_I256, max_value=MAX_I256))
def test_i256_round_trip(x):
    assert to_i256(from_i256(x)) == x


@given(st.integers(min_value=0, max_value=MAX_U256))
def test_u256_round_trip(x):
    assert from_i256(to_i256(x)) == x


def test_from_i256_out_of_range():
    with pytest.raises(ValueError):
        from_i256(MAX_I256 + 1)
    with pytest.raises(ValueError):
        from_i256(MIN_I256 - 1)


def test_to_i256_out_of_range():
    with pytest.raises(ValueError):
        to_i256(-1)
    with pytest.raises(ValueError):
        to_i256(MAX_U256 + 1)


def test_math_error_carries_kind():
    err = MathError(MathErrorKind.T)
    assert err.kind is MathErrorKind.T
    assert str(err) == "T"


def test_method_parameters_equality():
    assert MethodParameters(b"\x01", 5) == MethodParameters(b"\x01", 5)
    assert MethodParameters(b"\x01", 5) != MethodParameters(b"\x01", 6)
    assert MethodParameters().value == 0