"""
Hash quality analysers for hash-spread.
"""

from hash_spread.algorithms.buckets import (
    BUCKET_COUNT,
    BUCKET_WIDTH,
    BucketStatistics,
    bucket_index,
    bucketize,
    bucketize_hashes,
    bucketize_words,
)
from hash_spread.algorithms.collision import (
    DEFAULT_MULTIPLIERS,
    RateInfo,
    collision_rate_list,
    hash_collision_rate,
)

__all__ = [
    "RateInfo",
    "collision_rate_list",
    "hash_collision_rate",
    "DEFAULT_MULTIPLIERS",
    "BucketStatistics",
    "bucketize",
    "bucketize_hashes",
    "bucketize_words",
    "bucket_index",
    "BUCKET_COUNT",
    "BUCKET_WIDTH",
]
