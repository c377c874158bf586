"""Integer domains and unbiased uniform integer draws."""
from __future__ import annotations

import operator
from dataclasses import dataclass

from propgen.errors import InvalidRangeError
from propgen.rng.state import WORD_BITS, RandomState


@dataclass(frozen=True)
class IntegerDomain:
    name: str
    bits: int
    signed: bool = True

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def full_range(self) -> tuple[int, int]:
        return self.min_value, self.max_value


INT8 = IntegerDomain("int8", 8)
INT16 = IntegerDomain("int16", 16)
INT32 = IntegerDomain("int32", 32)
INT64 = IntegerDomain("int64", 64)
UINT8 = IntegerDomain("uint8", 8, signed=False)
UINT16 = IntegerDomain("uint16", 16, signed=False)
UINT32 = IntegerDomain("uint32", 32, signed=False)
UINT64 = IntegerDomain("uint64", 64, signed=False)


def as_bound(value: object, label: str) -> int:
    """Coerce a range bound to ``int``, rejecting bools and non-integers."""

    if isinstance(value, bool):
        raise InvalidRangeError(f"{label} bound must be an integer, got bool")
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise InvalidRangeError(f"{label} bound must be an integer, got {type(value).__name__}") from None


def check_range(low: int, high: int, domain: IntegerDomain | None = None) -> None:
    if low > high:
        raise InvalidRangeError(f"Empty range: low ({low}) is greater than high ({high})")
    if domain is not None and not (domain.contains(low) and domain.contains(high)):
        raise InvalidRangeError(
            f"Range [{low}, {high}] does not fit {domain.name} "
            f"[{domain.min_value}, {domain.max_value}]"
        )


def uniform_int(state: RandomState, low: int, high: int) -> tuple[int, RandomState]:
    """Draw a uniform integer in ``[low, high]`` and return it with the next state.

    Enough 64-bit words are concatenated to cover the span, and draws that
    land in the incomplete final block are rejected so every value in the
    range is equally likely.
    """

    check_range(low, high)
    span = high - low + 1
    if span == 1:
        return low, state

    words = max(1, -(-(span - 1).bit_length() // WORD_BITS))
    total = 1 << (words * WORD_BITS)
    limit = total - total % span
    while True:
        value = 0
        for _ in range(words):
            word, state = state.next()
            value = (value << WORD_BITS) | word
        if value < limit:
            return low + value % span, state
