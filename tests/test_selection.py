"""Tests for one_of, frequency, elements and growing_elements."""
from __future__ import annotations

from collections import Counter

import pytest

from propgen import (
    EmptyAlternativesError,
    GeneratorUsageError,
    InvalidWeightError,
    elements,
    frequency,
    from_seed,
    growing_elements,
    invoke,
    one_of,
    pure,
    split_many,
)
from propgen.combinators.selection import _prefix_length

_STATES = split_many(from_seed(2024), 4000)


@pytest.mark.parametrize(
    "build, name",
    [
        (lambda: one_of([]), "one_of"),
        (lambda: frequency([]), "frequency"),
        (lambda: elements([]), "elements"),
        (lambda: growing_elements([]), "growing_elements"),
    ],
)
def test_empty_alternatives_rejected(build, name: str) -> None:
    with pytest.raises(EmptyAlternativesError, match=name):
        build()


def test_usage_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        one_of([])
    assert issubclass(EmptyAlternativesError, GeneratorUsageError)


def test_one_of_reaches_every_alternative() -> None:
    gen = one_of([pure("a"), pure("b"), pure("c")])
    seen = {invoke(gen, state, 0) for state in _STATES[:300]}
    assert seen == {"a", "b", "c"}


def test_one_of_accepts_any_iterable() -> None:
    gen = one_of(pure(x) for x in range(3))
    assert invoke(gen, from_seed(0), 0) in {0, 1, 2}


def test_frequency_respects_weights() -> None:
    gen = frequency([(1, pure("A")), (3, pure("B"))])
    counts = Counter(invoke(gen, state, 0) for state in _STATES)
    ratio = counts["B"] / counts["A"]
    assert 2.5 < ratio < 3.6


def test_frequency_single_entry() -> None:
    gen = frequency([(5, pure("only"))])
    assert {invoke(gen, state, 0) for state in _STATES[:50]} == {"only"}


@pytest.mark.parametrize("weight", [0, -1, 1.5, True])
def test_frequency_rejects_bad_weights(weight: object) -> None:
    with pytest.raises(InvalidWeightError):
        frequency([(1, pure("a")), (weight, pure("b"))])  # type: ignore[list-item]


def test_elements_returns_members() -> None:
    gen = elements(["x", "y"])
    assert {invoke(gen, state, 0) for state in _STATES[:100]} == {"x", "y"}


def test_elements_does_not_transform() -> None:
    marker = object()
    assert invoke(elements([marker]), from_seed(0), 0) is marker


def test_growing_elements_at_size_zero() -> None:
    gen = growing_elements(["a", "b", "c", "d", "e"])
    assert {invoke(gen, state, 0) for state in _STATES[:200]} == {"a"}


def test_growing_elements_at_large_size() -> None:
    gen = growing_elements(["a", "b", "c", "d", "e"])
    assert {invoke(gen, state, 1000) for state in _STATES[:300]} == {"a", "b", "c", "d", "e"}


def test_growing_elements_prefix_grows_with_size() -> None:
    assert _prefix_length(5, 0) == 1
    assert _prefix_length(5, 10) == 2
    assert _prefix_length(5, 1000) >= 5
    lengths = [_prefix_length(20, size) for size in range(0, 101, 10)]
    assert lengths == sorted(lengths)
