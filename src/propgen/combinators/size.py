"""Combinators that read or override the size parameter."""
from __future__ import annotations

from typing import Callable, TypeVar

from propgen.errors import InvalidSizeError
from propgen.gen import Gen

T = TypeVar("T")


def sized(func: Callable[[int], Gen[T]]) -> Gen[T]:
    """Build a generator from the size it is invoked with."""

    return Gen(lambda state, size: func(size).run(state, size))


def resize(size: int, gen: Gen[T]) -> Gen[T]:
    """Run ``gen`` at a fixed ``size`` whatever size the caller passes."""

    if size < 0:
        raise InvalidSizeError(f"size must be non-negative, got {size}")
    return Gen(lambda state, _size: gen.run(state, size))
