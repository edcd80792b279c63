"""
Exceptions raised by hash-spread.
"""


class HashSpreadError(ValueError):
    """Base class for errors raised by hash-spread on invalid input."""


class EmptyInputError(HashSpreadError):
    """
    Raised when a statistic is requested over zero words or hash values.

    Minimum, maximum and rates are undefined for an empty input, so the
    analysers signal the caller instead of returning a sentinel.
    """
