"""Queries over a sorted list of initialized ticks."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar, overload


class _TickLike(Protocol):
    @property
    def index(self) -> int: ...

    @property
    def liquidity_net(self) -> int: ...


T = TypeVar("T", bound=_TickLike)


class TickList(Sequence[T]):
    """An immutable sequence of ticks, ordered by index, with lookup helpers.

    Ticks are any objects with ``index`` and ``liquidity_net`` attributes.
    """

    def __init__(self, ticks: Iterable[T]) -> None:
        self._ticks: tuple[T, ...] = tuple(ticks)

    @overload
    def __getitem__(self, item: int) -> T: ...

    @overload
    def __getitem__(self, item: slice) -> Sequence[T]: ...

    def __getitem__(self, item):
        return self._ticks[item]

    def __len__(self) -> int:
        return len(self._ticks)

    def __repr__(self) -> str:
        return f"TickList({list(self._ticks)!r})"

    def validate(self, tick_spacing: int) -> None:
        """Check spacing, ordering and zero net liquidity; raise ValueError otherwise."""
        if tick_spacing <= 0:
            raise ValueError("TICK_SPACING_NONZERO")
        if any(tick.index % tick_spacing != 0 for tick in self._ticks):
            raise ValueError("TICK_SPACING")
        if any(b.index < a.index for a, b in zip(self._ticks, self._ticks[1:])):
            raise ValueError("SORTED")
        if sum(tick.liquidity_net for tick in self._ticks) != 0:
            raise ValueError("ZERO_NET")

    def is_below_smallest(self, tick: int) -> bool:
        """Whether tick lies below the first tick in the list."""
        if not self._ticks:
            raise ValueError("LENGTH")
        return tick < self._ticks[0].index

    def is_at_or_above_largest(self, tick: int) -> bool:
        """Whether tick lies at or above the last tick in the list."""
        if not self._ticks:
            raise ValueError("LENGTH")
        return tick >= self._ticks[-1].index

    def get_tick(self, index: int) -> T:
        """Return the tick with exactly this index."""
        tick = self._ticks[self.binary_search_by_tick(index)]
        if tick.index != index:
            raise ValueError("NOT_CONTAINED")
        return tick

    def binary_search_by_tick(self, tick: int) -> int:
        """Position of the largest tick whose index is less than or equal to tick."""
        if self.is_below_smallest(tick):
            raise ValueError("BELOW_SMALLEST")
        return bisect_right(self._ticks, tick, key=lambda t: t.index) - 1

    def next_initialized_tick(self, tick: int, lte: bool) -> T:
        """Nearest tick at or below (lte) or strictly above (not lte) the given tick."""
        if lte:
            if self.is_below_smallest(tick):
                raise ValueError("BELOW_SMALLEST")
            if self.is_at_or_above_largest(tick):
                return self._ticks[-1]
            return self._ticks[self.binary_search_by_tick(tick)]
        if self.is_at_or_above_largest(tick):
            raise ValueError("AT_OR_ABOVE_LARGEST")
        if self.is_below_smallest(tick):
            return self._ticks[0]
        return self._ticks[self.binary_search_by_tick(tick) + 1]

    def next_initialized_tick_within_one_word(
        self, tick: int, lte: bool, tick_spacing: int
    ) -> tuple[int, bool]:
        """Next tick within the same 256-tick bitmap word, and whether it is initialized."""
        compressed = tick // tick_spacing
        if lte:
            word_pos = compressed >> 8
            minimum = (word_pos << 8) * tick_spacing
            if self.is_below_smallest(tick):
                return minimum, False
            index = self.next_initialized_tick(tick, lte).index
            nearest = max(minimum, index)
            return nearest, nearest == index
        word_pos = (compressed + 1) >> 8
        maximum = (((word_pos + 1) << 8) - 1) * tick_spacing
        if self.is_at_or_above_largest(tick):
            return maximum, False
        index = self.next_initialized_tick(tick, lte).index
        nearest = min(maximum, index)
        return nearest, nearest == index