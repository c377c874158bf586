"""Immutable, splittable random state backed by HKDF-SHA256."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from propgen.errors import GeneratorUsageError

logger = logging.getLogger(__name__)

KEY_LEN = 32
WORD_BITS = 64
WORD_LEN = WORD_BITS // 8
# Domain-separation labels, one per derivation.
_NEXT_INFO = b"propgen-state-next-v1"
_SPLIT_INFO = b"propgen-state-split-v1"
_SEED_INFO = b"propgen-state-seed-v1"


def _expand(key_material: bytes, length: int, info: bytes) -> bytes:
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=length,
        salt=None,
        info=info,
    )
    return hkdf.derive(key_material)


@dataclass(frozen=True)
class RandomState:
    """A random state value.

    Every operation returns fresh states and leaves ``self`` untouched, so a
    state can be handed to any number of generators without them observing
    each other.  ``next`` and ``split`` use separate HKDF labels, so the
    successor produced by ``next`` never coincides with either child of
    ``split``.
    """

    key: bytes

    def __post_init__(self) -> None:
        if len(self.key) != KEY_LEN:
            raise ValueError(f"Random state key must be {KEY_LEN} bytes long, got {len(self.key)}")

    def next(self) -> tuple[int, RandomState]:
        """Return a uniform unsigned 64-bit word and the successor state."""

        block = _expand(self.key, WORD_LEN + KEY_LEN, _NEXT_INFO)
        return int.from_bytes(block[:WORD_LEN], "little"), RandomState(block[WORD_LEN:])

    def split(self) -> tuple[RandomState, RandomState]:
        """Return two independent children of this state."""

        block = _expand(self.key, 2 * KEY_LEN, _SPLIT_INFO)
        return RandomState(block[:KEY_LEN]), RandomState(block[KEY_LEN:])


def from_seed(seed: int) -> RandomState:
    """Derive a state deterministically from an integer seed of any size or sign."""

    material = seed.to_bytes(seed.bit_length() // 8 + 1, "little", signed=True)
    return RandomState(_expand(material, KEY_LEN, _SEED_INFO))


def new_random_state() -> RandomState:
    """Return a state seeded from OS entropy."""

    logger.debug("seeding random state from os entropy")
    return RandomState(os.urandom(KEY_LEN))


def split_many(state: RandomState, count: int) -> list[RandomState]:
    """Split ``state`` into ``count`` independent states.

    Hand one of these to each parallel unit of work instead of sharing a state.
    """

    if count < 0:
        raise GeneratorUsageError(f"count must be non-negative, got {count}")
    states: list[RandomState] = []
    for _ in range(count):
        child, state = state.split()
        states.append(child)
    return states
