"""Custom exceptions for propgen."""


class PropgenError(Exception):
    """Base exception for propgen."""


class GeneratorUsageError(PropgenError, ValueError):
    """A combinator was built or invoked with arguments it cannot accept."""


class EmptyAlternativesError(GeneratorUsageError):
    """A selection combinator was given nothing to choose from."""


class InvalidRangeError(GeneratorUsageError):
    """Range bounds are inverted, not integers, or outside their domain."""


class InvalidSizeError(GeneratorUsageError):
    """Size parameter is negative."""


class InvalidWeightError(GeneratorUsageError):
    """Frequency weight is not a positive integer."""


class SearchExhaustedError(PropgenError):
    """Filtered generation gave up at its explicit size bound."""
