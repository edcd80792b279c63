"""
Range bucketing of 32-bit hash values.

The signed 32-bit range [-2^31, 2^31 - 1] is cut into 64 contiguous windows
of width 2^26. Counting how many hash values fall into each window gives a
coarse picture of how evenly a multiplier disperses a corpus: a good
multiplier fills every window, a poor one piles values into a few windows
near zero.

Because the bin edges are fixed, the window of a value is computed directly
as ``(value + 2^31) >> 26`` instead of testing every window in turn. Window
63 ends at 2^31, one past INT32_MAX, so the largest representable value is
counted like any other.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from hash_spread.core.base import HashStatistic
from hash_spread.core.errors import EmptyInputError
from hash_spread.core.hash import INT32_MAX, INT32_MIN, hash_all

logger = logging.getLogger(__name__)

BUCKET_WIDTH = 67108864  # 2^26
BUCKET_COUNT = 64  # BUCKET_COUNT * BUCKET_WIDTH == 2^32
_BUCKET_SHIFT = 26


class BucketStatistics(HashStatistic, Mapping):
    """
    Read-only histogram of hash values over the 64 fixed windows.

    Behaves as an ordered mapping from bucket index (0..63, ascending value
    order) to the number of values in that bucket's half-open range
    ``[INT32_MIN + i * BUCKET_WIDTH, INT32_MIN + (i + 1) * BUCKET_WIDTH)``.
    """

    def __init__(self, counts: Sequence[int], dropped: int = 0):
        """
        Initialize the statistics from per-bucket counts.

        Args:
            counts: Exactly BUCKET_COUNT non-negative counts, bucket 0 first.
            dropped: Number of input values that lay outside the 32-bit range.

        Raises:
            ValueError: If the number of counts is wrong or a count is negative.
        """
        if len(counts) != BUCKET_COUNT:
            raise ValueError(
                f"Expected {BUCKET_COUNT} bucket counts, got {len(counts)}"
            )
        if any(count < 0 for count in counts) or dropped < 0:
            raise ValueError("Bucket counts must be non-negative")

        self._counts: Tuple[int, ...] = tuple(int(count) for count in counts)
        self._dropped = int(dropped)

    def __getitem__(self, index: int) -> int:
        if not isinstance(index, int) or not 0 <= index < BUCKET_COUNT:
            raise KeyError(index)
        return self._counts[index]

    def __iter__(self) -> Iterator[int]:
        return iter(range(BUCKET_COUNT))

    def __len__(self) -> int:
        return BUCKET_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BucketStatistics):
            return NotImplemented
        return self._counts == other._counts and self._dropped == other._dropped

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BucketStatistics(total={self.total}, dropped={self._dropped})"

    @property
    def counts(self) -> List[int]:
        """Per-bucket counts, bucket 0 first."""
        return list(self._counts)

    @property
    def total(self) -> int:
        """Number of values counted in some bucket."""
        return sum(self._counts)

    @property
    def dropped(self) -> int:
        """Number of input values outside the signed 32-bit range."""
        return self._dropped

    @staticmethod
    def bounds(index: int) -> Tuple[int, int]:
        """
        Get the half-open value range covered by a bucket.

        Args:
            index: Bucket index, 0..63.

        Returns:
            (lower, upper) with lower inclusive and upper exclusive.

        Raises:
            IndexError: If the index is outside 0..63.
        """
        if not 0 <= index < BUCKET_COUNT:
            raise IndexError(f"Bucket index {index} out of range")
        lower = INT32_MIN + index * BUCKET_WIDTH
        return lower, lower + BUCKET_WIDTH

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            {
                "bucket_width": BUCKET_WIDTH,
                "counts": list(self._counts),
                "dropped": self._dropped,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BucketStatistics":
        cls._check_type(data)
        if data.get("bucket_width", BUCKET_WIDTH) != BUCKET_WIDTH:
            raise ValueError(f"Unsupported bucket width: {data['bucket_width']}")
        return cls(data["counts"], dropped=data.get("dropped", 0))

    def get_stats(self) -> Dict[str, Any]:
        """
        Get dispersion figures for the histogram.

        Returns:
            A dictionary with the total, the number of empty buckets, the
            min/max/mean counts, their standard deviation, the index of the
            busiest bucket and the chi-square statistic against a uniform
            spread (0 for a perfectly even histogram).
        """
        stats = super().get_stats()
        total = self.total
        mean = total / BUCKET_COUNT
        variance = sum((c - mean) ** 2 for c in self._counts) / BUCKET_COUNT
        max_count = max(self._counts)

        stats.update(
            {
                "buckets": BUCKET_COUNT,
                "bucket_width": BUCKET_WIDTH,
                "total": total,
                "dropped": self._dropped,
                "empty_buckets": sum(1 for c in self._counts if c == 0),
                "min_count": min(self._counts),
                "max_count": max_count,
                "mean_count": mean,
                "std_dev": math.sqrt(variance),
                "busiest_bucket": self._counts.index(max_count),
                "chi_square": (variance * BUCKET_COUNT / mean) if mean else 0.0,
            }
        )
        return stats


def bucket_index(value: int) -> Optional[int]:
    """
    Get the bucket a hash value falls into.

    Returns:
        The bucket index, or None for values outside [INT32_MIN, INT32_MAX].
    """
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return (value - INT32_MIN) >> _BUCKET_SHIFT


def bucketize_hashes(hash_values: Iterable[int]) -> BucketStatistics:
    """
    Count hash values per bucket.

    Args:
        hash_values: Signed 32-bit hash values.

    Returns:
        A fresh BucketStatistics. Values outside the 32-bit range are not
        counted in any bucket and are reported through ``dropped``.

    Raises:
        EmptyInputError: If no values are given.
        TypeError: If a value is not an integer.
    """
    counts = [0] * BUCKET_COUNT
    dropped = 0
    seen = 0

    for value in hash_values:
        if not isinstance(value, int):
            raise TypeError(
                f"Hash values must be integers, got {type(value).__name__}; "
                "pass multiplier= to bucketize words"
            )
        seen += 1
        index = bucket_index(value)
        if index is None:
            dropped += 1
        else:
            counts[index] += 1

    if seen == 0:
        raise EmptyInputError("Cannot bucketize an empty list of hash values")
    if dropped:
        logger.debug("dropped %d of %d values outside the int32 range", dropped, seen)

    return BucketStatistics(counts, dropped=dropped)


def bucketize_words(words: Iterable[str], multiplier: int) -> BucketStatistics:
    """Hash every word with ``multiplier`` and count the values per bucket."""
    return bucketize_hashes(hash_all(words, multiplier))


def bucketize(values: Iterable[Any], multiplier: Optional[int] = None) -> BucketStatistics:
    """
    Build the bucket histogram from hash values or from words.

    Args:
        values: Hash values when ``multiplier`` is None, otherwise words.
        multiplier: If given, the words are hashed with it first.

    Returns:
        A fresh BucketStatistics.

    Raises:
        EmptyInputError: If there is nothing to count.
    """
    if multiplier is None:
        return bucketize_hashes(values)
    return bucketize_words(values, multiplier)
