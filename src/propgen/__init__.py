"""propgen: composable, size-parameterized random generators.

The objects listed in ``__all__`` form the supported public surface.
"""

from importlib.metadata import PackageNotFoundError, version

from propgen.combinators import (
    Found,
    choose,
    elements,
    frequency,
    growing_elements,
    list_of,
    list_of1,
    one_of,
    resize,
    such_that,
    such_that_optional,
    sized,
    variant,
    vector_of,
)
from propgen.errors import (
    EmptyAlternativesError,
    GeneratorUsageError,
    InvalidRangeError,
    InvalidSizeError,
    InvalidWeightError,
    PropgenError,
    SearchExhaustedError,
)
from propgen.gen import Gen, invoke, pure, sequence
from propgen.rng import (
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    IntegerDomain,
    RandomState,
    from_seed,
    new_random_state,
    split_many,
)
from propgen.sampling import SampleParams, generate, resolve_sample_params, sample

__all__ = [
    "EmptyAlternativesError",
    "Found",
    "Gen",
    "GeneratorUsageError",
    "INT16",
    "INT32",
    "INT64",
    "INT8",
    "IntegerDomain",
    "InvalidRangeError",
    "InvalidSizeError",
    "InvalidWeightError",
    "PropgenError",
    "RandomState",
    "SampleParams",
    "SearchExhaustedError",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT8",
    "__version__",
    "choose",
    "elements",
    "frequency",
    "from_seed",
    "generate",
    "growing_elements",
    "invoke",
    "list_of",
    "list_of1",
    "new_random_state",
    "one_of",
    "pure",
    "resize",
    "resolve_sample_params",
    "sample",
    "sequence",
    "sized",
    "split_many",
    "such_that",
    "such_that_optional",
    "variant",
    "vector_of",
]

try:
    __version__ = version("propgen")
except PackageNotFoundError:  # pragma: no cover - happens only from source checkout
    __version__ = "0.0.0-dev"
