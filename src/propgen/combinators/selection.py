"""Uniform and weighted selection among alternatives."""
from __future__ import annotations

import math
from typing import Iterable, Sequence, TypeVar

from propgen.combinators.ranges import choose
from propgen.combinators.size import sized
from propgen.errors import EmptyAlternativesError, InvalidWeightError
from propgen.gen import Gen

T = TypeVar("T")


def one_of(gens: Iterable[Gen[T]]) -> Gen[T]:
    """Delegate to one of ``gens``, each equally likely."""

    alternatives = list(gens)
    if not alternatives:
        raise EmptyAlternativesError("one_of used with empty list")
    return choose(0, len(alternatives) - 1).bind(lambda index: alternatives[index])


def _pick(target: int, weighted: Sequence[tuple[int, Gen[T]]]) -> Gen[T]:
    for weight, gen in weighted:
        if target <= weight:
            return gen
        target -= weight
    raise AssertionError("frequency target exceeded total weight")  # pragma: no cover


def frequency(weighted: Iterable[tuple[int, Gen[T]]]) -> Gen[T]:
    """Delegate to one of ``weighted`` with probability proportional to its weight.

    Earlier entries claim the lower part of the cumulative weight range.
    """

    entries = list(weighted)
    if not entries:
        raise EmptyAlternativesError("frequency used with empty list")
    for weight, _gen in entries:
        if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
            raise InvalidWeightError(f"frequency weights must be positive integers, got {weight!r}")
    total = sum(weight for weight, _gen in entries)
    return choose(1, total).bind(lambda target: _pick(target, entries))


def elements(xs: Iterable[T]) -> Gen[T]:
    """Pick one of ``xs`` uniformly."""

    items = tuple(xs)
    if not items:
        raise EmptyAlternativesError("elements used with empty list")
    return choose(0, len(items) - 1).map(items.__getitem__)


def _prefix_length(count: int, size: int) -> int:
    return max(1, int(math.log(size + 1) * count / math.log(100)))


def growing_elements(xs: Iterable[T]) -> Gen[T]:
    """Pick from a prefix of ``xs`` that grows logarithmically with size.

    At size 0 only the first item is eligible; around size 99 all are.
    Order ``xs`` from simplest to most complex.
    """

    items = tuple(xs)
    if not items:
        raise EmptyAlternativesError("growing_elements used with empty list")
    count = len(items)
    return sized(lambda size: elements(items[: _prefix_length(count, size)]))
