from v3poolmath.common import Q128
from v3poolmath.fee_growth import FeeGrowthOutside, get_fee_growth_inside, get_tokens_owed


def test_zero():
    assert get_fee_growth_inside(
        FeeGrowthOutside(), FeeGrowthOutside(), -1, 1, 0, 0, 0
    ) == (0, 0)


def test_non_zero_all_inside():
    assert get_fee_growth_inside(
        FeeGrowthOutside(), FeeGrowthOutside(), -1, 1, 0, Q128, Q128
    ) == (Q128, Q128)


def test_non_zero_some_outside():
    q127 = Q128 >> 1
    lower = FeeGrowthOutside(q127, q127)
    upper = FeeGrowthOutside()
    assert get_fee_growth_inside(lower, upper, -1, 1, 0, Q128, Q128) == (q127, q127)


def test_current_below_range_uses_lower_minus_upper():
    q127 = Q128 >> 1
    lower = FeeGrowthOutside(q127, q127)
    assert get_fee_growth_inside(lower, FeeGrowthOutside(), -1, 1, -2, Q128, Q128) == (
        q127,
        q127,
    )


def test_current_above_range_wraps():
    q127 = Q128 >> 1
    lower = FeeGrowthOutside(q127, q127)
    inside0, inside1 = get_fee_growth_inside(
        lower, FeeGrowthOutside(), -1, 1, 1, Q128, Q128
    )
    assert (inside0 + q127) % (1 << 256) == 0
    assert inside0 == inside1


def test_get_tokens_owed():
    assert get_tokens_owed(0, 0, 1, Q128, Q128) == (1, 1)


def test_get_tokens_owed_no_growth():
    assert get_tokens_owed(Q128, Q128, 1000, Q128, Q128) == (0, 0)