import pytest
from hypothesis import given, strategies as st

from v3poolmath.common import MathError, MathErrorKind
from v3poolmath.tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)


def test_throws_for_tick_too_small():
    with pytest.raises(MathError) as excinfo:
        get_sqrt_ratio_at_tick(MIN_TICK - 1)
    assert excinfo.value.kind is MathErrorKind.T
    assert str(excinfo.value) == "T"


def test_throws_for_tick_too_large():
    with pytest.raises(MathError) as excinfo:
        get_sqrt_ratio_at_tick(MAX_TICK + 1)
    assert excinfo.value.kind is MathErrorKind.T


def test_min_tick_value():
    assert MIN_TICK == -887272
    assert get_sqrt_ratio_at_tick(MIN_TICK) == MIN_SQRT_RATIO


def test_tick_zero():
    assert get_sqrt_ratio_at_tick(0) == 1 << 96


def test_max_tick_value():
    assert MAX_TICK == 887272
    assert get_sqrt_ratio_at_tick(MAX_TICK) == MAX_SQRT_RATIO


def test_tick_at_min_sqrt_ratio():
    assert get_tick_at_sqrt_ratio(MIN_SQRT_RATIO) == MIN_TICK


def test_tick_at_max_sqrt_ratio_minus_one():
    assert get_tick_at_sqrt_ratio(MAX_SQRT_RATIO - 1) == MAX_TICK - 1


@pytest.mark.parametrize(
    "ratio", [0, MIN_SQRT_RATIO - 1, MAX_SQRT_RATIO, MAX_SQRT_RATIO + 1, 1 << 200]
)
def test_tick_at_sqrt_ratio_out_of_range(ratio):
    with pytest.raises(MathError) as excinfo:
        get_tick_at_sqrt_ratio(ratio)
    assert excinfo.value.kind is MathErrorKind.R


@pytest.mark.parametrize("tick", range(-128, 129))
def test_round_trip_small_ticks(tick):
    assert get_tick_at_sqrt_ratio(get_sqrt_ratio_at_tick(tick)) == tick


@pytest.mark.parametrize("shift", range(33, 160))
def test_tick_brackets_power_of_two(shift):
    ratio = 1 << shift
    tick = get_tick_at_sqrt_ratio(ratio)
    assert get_sqrt_ratio_at_tick(tick) <= ratio
    assert get_sqrt_ratio_at_tick(tick + 1) > ratio


@pytest.mark.parametrize("shift", [32, *range(160, 192)])
def test_power_of_two_outside_range(shift):
    with pytest.raises(MathError):
        get_tick_at_sqrt_ratio(1 << shift)


@given(st.integers(min_value=MIN_TICK, max_value=MAX_TICK - 1))
def test_sqrt_ratio_strictly_increasing(tick):
    assert get_sqrt_ratio_at_tick(tick) < get_sqrt_ratio_at_tick(tick + 1)


@given(st.integers(min_value=MIN_TICK, max_value=MAX_TICK - 1))
def test_round_trip_any_tick(tick):
    assert get_tick_at_sqrt_ratio(get_sqrt_ratio_at_tick(tick)) == tick


@given(st.integers(min_value=MIN_SQRT_RATIO, max_value=MAX_SQRT_RATIO - 1))
def test_tick_brackets_any_ratio(ratio):
    tick = get_tick_at_sqrt_ratio(ratio)
    assert get_sqrt_ratio_at_tick(tick) <= ratio < get_sqrt_ratio_at_tick(tick + 1)