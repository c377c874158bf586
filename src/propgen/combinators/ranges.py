"""Uniform integer ranges and independent sub-streams."""
from __future__ import annotations

import operator
from typing import TypeVar

from propgen.gen import Gen
from propgen.rng.domains import IntegerDomain, as_bound, check_range, uniform_int
from propgen.rng.state import RandomState

T = TypeVar("T")


def choose(low: int, high: int, domain: IntegerDomain | None = None) -> Gen[int]:
    """Uniform integer in ``[low, high]``, inclusive. Ignores size.

    With ``domain`` set, both bounds must lie inside it (e.g. ``INT8``).
    """

    lo = as_bound(low, "low")
    hi = as_bound(high, "high")
    check_range(lo, hi, domain)
    return Gen(lambda state, _size: uniform_int(state, lo, hi)[0])


def _vary(seed: int, state: RandomState) -> RandomState:
    while True:
        left, right = state.split()
        state = left if seed % 2 == 0 else right
        if seed == seed // 2:
            return state
        seed //= 2


def variant(seed: int, gen: Gen[T]) -> Gen[T]:
    """Run ``gen`` on a sub-stream selected by ``seed``.

    The seed's bits pick a path of left/right children down the split tree,
    so equal seeds give equal streams and different seeds give independent
    ones.  Negative seeds are allowed.
    """

    path = operator.index(seed)
    return Gen(lambda state, size: gen.run(_vary(path, state), size))
