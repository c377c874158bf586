"""Combinators for building generators.

Everything here returns a new :class:`propgen.gen.Gen`; nothing runs until
the result is invoked with a random state and a size.
"""
from __future__ import annotations

from propgen.combinators.collections import list_of, list_of1, vector_of
from propgen.combinators.filtering import Found, such_that, such_that_optional
from propgen.combinators.ranges import choose, variant
from propgen.combinators.selection import elements, frequency, growing_elements, one_of
from propgen.combinators.size import resize, sized

__all__ = [
    "Found",
    "choose",
    "elements",
    "frequency",
    "growing_elements",
    "list_of",
    "list_of1",
    "one_of",
    "resize",
    "such_that",
    "such_that_optional",
    "sized",
    "variant",
    "vector_of",
]
