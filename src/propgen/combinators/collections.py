"""Sequence-valued generators built from element generators."""
from __future__ import annotations

from typing import TypeVar

from propgen.combinators.ranges import choose
from propgen.combinators.size import sized
from propgen.errors import GeneratorUsageError
from propgen.gen import Gen, sequence

T = TypeVar("T")


def vector_of(count: int, gen: Gen[T]) -> Gen[list[T]]:
    """Exactly ``count`` independent draws from ``gen``."""

    if count < 0:
        raise GeneratorUsageError(f"vector_of length must be non-negative, got {count}")
    return sequence([gen] * count)


def list_of(gen: Gen[T]) -> Gen[list[T]]:
    """A list whose length is uniform in ``[0, size]``."""

    return sized(lambda size: choose(0, size).bind(lambda count: vector_of(count, gen)))


def list_of1(gen: Gen[T]) -> Gen[list[T]]:
    """A non-empty list whose length is uniform in ``[1, max(1, size)]``."""

    return sized(lambda size: choose(1, max(1, size)).bind(lambda count: vector_of(count, gen)))
