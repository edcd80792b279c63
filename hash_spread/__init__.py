"""
hash-spread - Empirical quality metrics for multiplicative string hashes

hash-spread measures how a family of polynomial string hash functions,
``h = m * h + c`` in 32-bit arithmetic, behaves over a word corpus: how often
words collide and how evenly the values spread across the 32-bit range.
"""

__version__ = "0.1.0"

# Import main functions to make them available at the top level
from hash_spread.algorithms.buckets import (
    BucketStatistics,
    bucketize,
    bucketize_hashes,
    bucketize_words,
)
from hash_spread.algorithms.collision import (
    DEFAULT_MULTIPLIERS,
    RateInfo,
    collision_rate_list,
)
from hash_spread.core.errors import EmptyInputError, HashSpreadError
from hash_spread.core.hash import multiplicative_hash

__all__ = [
    # Hashing
    "multiplicative_hash",
    # Collision analysis
    "RateInfo",
    "collision_rate_list",
    "DEFAULT_MULTIPLIERS",
    # Range bucketing
    "BucketStatistics",
    "bucketize",
    "bucketize_hashes",
    "bucketize_words",
    # Errors
    "HashSpreadError",
    "EmptyInputError",
]
