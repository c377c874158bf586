"""Splittable randomness consumed by generators."""
from __future__ import annotations

from propgen.rng.domains import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerDomain,
    uniform_int,
)
from propgen.rng.state import KEY_LEN, WORD_BITS, RandomState, from_seed, new_random_state, split_many

__all__ = [
    "INT16",
    "INT32",
    "INT64",
    "INT8",
    "IntegerDomain",
    "KEY_LEN",
    "RandomState",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT8",
    "WORD_BITS",
    "from_seed",
    "new_random_state",
    "split_many",
    "uniform_int",
]
