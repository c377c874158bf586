"""Helpers for running generators outside a test driver."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeVar

from propgen.errors import GeneratorUsageError
from propgen.gen import Gen
from propgen.rng.state import RandomState, from_seed, new_random_state, split_many

T = TypeVar("T")

DEFAULT_GENERATE_SIZE = 30
DEFAULT_SAMPLE_COUNT = 11
DEFAULT_SIZE_STEP = 2


@dataclass(frozen=True)
class SampleParams:
    count: int = DEFAULT_SAMPLE_COUNT
    size_step: int = DEFAULT_SIZE_STEP
    seed: int | None = None


def resolve_sample_params(
    base: SampleParams | None = None,
    *,
    count: int | None = None,
    size_step: int | None = None,
    seed: int | None = None,
) -> SampleParams:
    """Apply overrides to ``base`` (or the defaults) and validate the result."""

    params = base or SampleParams()
    if count is not None:
        params = replace(params, count=count)
    if size_step is not None:
        params = replace(params, size_step=size_step)
    if seed is not None:
        params = replace(params, seed=seed)

    if params.count < 0:
        raise GeneratorUsageError(f"sample count must be non-negative, got {params.count}")
    if params.size_step < 0:
        raise GeneratorUsageError(f"sample size step must be non-negative, got {params.size_step}")
    return params


def _state_for(seed: int | None) -> RandomState:
    return new_random_state() if seed is None else from_seed(seed)


def generate(gen: Gen[T], *, size: int = DEFAULT_GENERATE_SIZE, seed: int | None = None) -> T:
    """Produce one value from ``gen``. Reproducible when ``seed`` is given."""

    return gen.invoke(_state_for(seed), size)


def sample(gen: Gen[T], params: SampleParams | None = None) -> list[T]:
    """Produce ``params.count`` values at sizes ``0, step, 2*step, ...``.

    Each value comes from its own split-off state.
    """

    resolved = resolve_sample_params(params)
    states = split_many(_state_for(resolved.seed), resolved.count)
    return [gen.invoke(state, index * resolved.size_step) for index, state in enumerate(states)]
