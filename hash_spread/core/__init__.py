"""
Core functionality for hash-spread.
"""

from hash_spread.core.base import HashStatistic
from hash_spread.core.errors import EmptyInputError, HashSpreadError
from hash_spread.core.hash import (
    INT32_MAX,
    INT32_MIN,
    char_codes,
    hash_all,
    multiplicative_hash,
    to_int32,
)

__all__ = [
    # Base classes
    "HashStatistic",
    # Errors
    "HashSpreadError",
    "EmptyInputError",
    # Hashing
    "multiplicative_hash",
    "hash_all",
    "char_codes",
    "to_int32",
    "INT32_MIN",
    "INT32_MAX",
]
