# v3poolmath

Exact integer arithmetic for concentrated-liquidity AMM pools: ticks, Q64.96
square-root prices, token amount deltas, swap steps, fee growth and liquidity
for given amounts. Every value is a plain Python `int`. Where the pool math
works in fixed-width unsigned words, results are wrapped modulo 2**256 or
checked against 128-, 160- and 256-bit limits, and a failure raises an
exception instead of returning a wrong number.

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## Install

```
pip install v3poolmath
```

For running the test suite:

```
pip install "v3poolmath[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `v3poolmath.common` | `MathError`, `MathErrorKind`, `MethodParameters`, `wrap_u256`, `to_i256`, `from_i256`, constants `Q96`, `Q128`, `Q192` and integer limits |
| `v3poolmath.bit_math` | `most_significant_bit`, `least_significant_bit` |
| `v3poolmath.full_math` | `mul_div`, `mul_div_rounding_up`, `mul_div_96` |
| `v3poolmath.liquidity_math` | `add_delta` |
| `v3poolmath.fee_growth` | `FeeGrowthOutside`, `get_fee_growth_inside`, `get_tokens_owed` |
| `v3poolmath.sqrt_ratio` | `encode_sqrt_ratio_x96` |
| `v3poolmath.tick_math` | `get_sqrt_ratio_at_tick`, `get_tick_at_sqrt_ratio`, `MIN_TICK`, `MAX_TICK`, `MIN_SQRT_RATIO`, `MAX_SQRT_RATIO` |
| `v3poolmath.nearest_usable_tick` | `nearest_usable_tick` |
| `v3poolmath.tick_list` | `TickList` |
| `v3poolmath.sqrt_price_math` | `get_next_sqrt_price_from_input`, `get_next_sqrt_price_from_output`, the two rounding helpers they use, `get_amount_0_delta`, `get_amount_1_delta` and their `_signed` variants |
| `v3poolmath.swap_math` | `compute_swap_step` |
| `v3poolmath.max_liquidity` | `max_liquidity_for_amounts`, `max_liquidity_for_amount0_precise`, `max_liquidity_for_amount0_imprecise`, `max_liquidity_for_amount1` |

## Examples

Prices and ticks:

```python
from v3poolmath.sqrt_ratio import encode_sqrt_ratio_x96
from v3poolmath.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

price = encode_sqrt_ratio_x96(1, 1)          # 2**96
assert get_sqrt_ratio_at_tick(0) == price
assert get_tick_at_sqrt_ratio(price) == 0
```

Rounding a tick to the pool's spacing:

```python
from v3poolmath.nearest_usable_tick import nearest_usable_tick

nearest_usable_tick(5, 10)    # 10
nearest_usable_tick(-6, 10)   # -10
```

One swap step:

```python
from v3poolmath.swap_math import compute_swap_step
from v3poolmath.tick_math import get_sqrt_ratio_at_tick

next_price, amount_in, amount_out, fee = compute_swap_step(
    get_sqrt_ratio_at_tick(0),
    get_sqrt_ratio_at_tick(-60),
    10**18,
    10**15,   # non-negative: exact input; negative: exact output
    3000,     # fee in hundredths of a bip
)
```

Liquidity for given token amounts:

```python
from v3poolmath.max_liquidity import max_liquidity_for_amounts
from v3poolmath.sqrt_ratio import encode_sqrt_ratio_x96

max_liquidity_for_amounts(
    encode_sqrt_ratio_x96(1, 1),
    encode_sqrt_ratio_x96(100, 110),
    encode_sqrt_ratio_x96(110, 100),
    100,
    200,
    False,
)  # 2148
```

Walking initialized ticks. Any object with `index` and `liquidity_net`
attributes can go into a `TickList`:

```python
from dataclasses import dataclass

from v3poolmath.tick_list import TickList
from v3poolmath.tick_math import MAX_TICK, MIN_TICK


@dataclass(frozen=True)
class Tick:
    index: int
    liquidity_gross: int
    liquidity_net: int


ticks = TickList([
    Tick(MIN_TICK + 1, 10, 10),
    Tick(0, 5, -5),
    Tick(MAX_TICK - 1, 5, -5),
])
ticks.validate(1)
ticks.next_initialized_tick(1, True).index                 # 0
ticks.next_initialized_tick_within_one_word(0, True, 1)    # (0, True)
```

## Errors

The arithmetic functions raise `v3poolmath.common.MathError` (a subclass of
`ArithmeticError`) where the pool math cannot produce a valid result, for
example on a zero denominator, a result that does not fit in 256 bits, a
price that does not fit in 160 bits, zero price or liquidity, or a tick or
sqrt price outside the valid range. Its `kind` attribute is a `MathErrorKind`
member naming the cause.

`ValueError` is raised for invalid arguments: zero passed to the bit helpers,
a non-positive tick spacing or out-of-range tick in `nearest_usable_tick`, a
tick list that is empty, unsorted, off-spacing or not zero-net, and integers
outside the signed or unsigned range a function accepts.

## What it does not do

The package works on raw integers only. It has no token, currency or price
objects, so it does not turn ticks into human-readable prices or prices back
into ticks, and it does not compute pool addresses or encode swap routes.
`MethodParameters` is only a container for calldata bytes and a value; nothing
in the package builds calldata. There is no command-line tool and no network
access.