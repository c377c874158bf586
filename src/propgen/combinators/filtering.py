"""Predicate-filtered generation."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from propgen.combinators.size import sized
from propgen.errors import InvalidSizeError, SearchExhaustedError
from propgen.gen import Gen
from propgen.rng.state import RandomState

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A value that satisfied the predicate of :func:`such_that_optional`."""

    value: T


def _attempts(gen: Gen[T], predicate: Callable[[T], bool], size: int) -> Gen[Found[T] | None]:
    budget = max(size, 1)

    def _run(state: RandomState, _size: int) -> Found[T] | None:
        for attempt in range(budget):
            child, state = state.split()
            candidate = gen.run(child, 2 * attempt + budget)
            if predicate(candidate):
                return Found(candidate)
        return None

    return Gen(_run)


def such_that_optional(gen: Gen[T], predicate: Callable[[T], bool]) -> Gen[Found[T] | None]:
    """Try to generate a value satisfying ``predicate``.

    At size ``n`` this makes at most ``max(n, 1)`` draws, each at a larger size
    than the last.  Returns ``Found(value)`` for the first passing value, or
    ``None`` when every attempt fails.
    """

    return sized(lambda size: _attempts(gen, predicate, size))


def such_that(
    gen: Gen[T],
    predicate: Callable[[T], bool],
    *,
    max_size: int | None = None,
) -> Gen[T]:
    """Generate a value satisfying ``predicate``.

    Runs :func:`such_that_optional`; when it finds nothing, the whole search is
    repeated one size larger, and so on.

    .. warning::
        By default there is no limit on that retry.  If ``gen`` cannot produce
        a value accepted by ``predicate``, invoking the result never returns.
        Pass ``max_size`` to raise :class:`SearchExhaustedError` instead once
        the search would go past that size.
    """

    if max_size is not None and max_size < 0:
        raise InvalidSizeError(f"max_size must be non-negative, got {max_size}")
    search = such_that_optional(gen, predicate)

    def _run(state: RandomState, size: int) -> T:
        while True:
            child, state = state.split()
            found = search.run(child, size)
            if found is not None:
                return found.value
            if max_size is not None and size >= max_size:
                logger.debug("such_that gave up at size %d", size)
                raise SearchExhaustedError(f"No value satisfied the predicate up to size {max_size}")
            size += 1
            logger.debug("such_that found nothing, retrying at size %d", size)

    return Gen(_run)
