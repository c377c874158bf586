"""Tests for the splittable random state."""
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from propgen.errors import GeneratorUsageError
from propgen.rng import KEY_LEN, RandomState, from_seed, new_random_state, split_many


def test_key_length_enforced() -> None:
    with pytest.raises(ValueError, match="32 bytes"):
        RandomState(b"short")


def test_next_is_deterministic() -> None:
    state = from_seed(7)
    assert state.next() == state.next()


def test_next_returns_64_bit_word_and_new_state() -> None:
    state = from_seed(7)
    word, successor = state.next()
    assert 0 <= word < 2**64
    assert successor != state
    assert len(successor.key) == KEY_LEN


def test_split_children_are_distinct() -> None:
    state = from_seed(11)
    left, right = state.split()
    assert left != right
    assert state not in (left, right)
    assert state.split() == (left, right)


def test_next_and_split_do_not_collide() -> None:
    state = from_seed(3)
    _word, successor = state.next()
    assert successor not in state.split()


@given(seed=st.integers(min_value=-(2**130), max_value=2**130))
def test_from_seed_is_deterministic(seed: int) -> None:
    assert from_seed(seed) == from_seed(seed)


def test_from_seed_distinguishes_nearby_seeds() -> None:
    keys = {from_seed(seed).key for seed in range(-50, 50)}
    assert len(keys) == 100


def test_new_random_state_uses_fresh_entropy() -> None:
    assert new_random_state() != new_random_state()


def test_split_many_yields_independent_states() -> None:
    states = split_many(from_seed(5), 16)
    assert len(states) == 16
    assert len({s.key for s in states}) == 16
    assert split_many(from_seed(5), 16) == states


def test_split_many_zero_and_negative() -> None:
    assert split_many(from_seed(5), 0) == []
    with pytest.raises(GeneratorUsageError):
        split_many(from_seed(5), -1)
