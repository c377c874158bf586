"""The generator abstraction and its basic plumbing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, TypeVar

from propgen.errors import InvalidSizeError
from propgen.rng.state import RandomState

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Gen(Generic[T]):
    """A recipe for producing a ``T`` from a random state and a size.

    ``run`` must be pure: equal ``(state, size)`` arguments give equal results.
    Combinators wrap generators in new ``Gen`` values and never modify them.
    """

    run: Callable[[RandomState, int], T]

    def invoke(self, state: RandomState, size: int) -> T:
        if size < 0:
            raise InvalidSizeError(f"size must be non-negative, got {size}")
        return self.run(state, size)

    def map(self, func: Callable[[T], U]) -> Gen[U]:
        return Gen(lambda state, size: func(self.run(state, size)))

    def bind(self, func: Callable[[T], Gen[U]]) -> Gen[U]:
        """Feed this generator's value into ``func`` and run the generator it returns.

        The state is split so the two stages draw from independent streams.
        """

        def _run(state: RandomState, size: int) -> U:
            left, right = state.split()
            return func(self.run(left, size)).run(right, size)

        return Gen(_run)

    flat_map = bind


def invoke(gen: Gen[T], state: RandomState, size: int) -> T:
    """Run ``gen`` with a concrete state and size."""

    return gen.invoke(state, size)


def pure(value: T) -> Gen[T]:
    return Gen(lambda _state, _size: value)


def sequence(gens: Iterable[Gen[T]]) -> Gen[list[T]]:
    """Run each generator on its own split-off state, collecting results in order."""

    members = list(gens)

    def _run(state: RandomState, size: int) -> list[T]:
        values: list[T] = []
        for member in members:
            child, state = state.split()
            values.append(member.run(child, size))
        return values

    return Gen(_run)
