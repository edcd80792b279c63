"""
Collision analysis for multiplicative string hashes.

For each candidate multiplier every word of a corpus is hashed and the
resulting values are summarised: their range, how many words share a hash
with another word, and what fraction of the corpus that represents.

Comparing these figures across multipliers shows why small even multipliers
collide heavily (multiplying by 2 is a shift that pushes early characters out
of the 32-bit word) while odd primes such as 31 keep collisions rare.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence

from hash_spread.core.base import HashStatistic
from hash_spread.core.errors import EmptyInputError
from hash_spread.core.hash import hash_all

logger = logging.getLogger(__name__)

# Multipliers usually compared when explaining the choice of 31.
DEFAULT_MULTIPLIERS = (2, 3, 5, 7, 17, 31, 32, 33, 39, 41, 199)


@dataclass(frozen=True)
class RateInfo(HashStatistic):
    """
    Collision figures for one multiplier over one corpus.

    Attributes:
        max_hash: Largest hash value observed.
        min_hash: Smallest hash value observed.
        multiplier: The multiplier the values were computed with.
        collision_count: Number of values minus number of distinct values.
        collision_rate: collision_count / total_count, in [0, 1).
        total_count: Number of hashed words.
        distinct_count: Number of distinct hash values.
    """

    max_hash: int
    min_hash: int
    multiplier: int
    collision_count: int
    collision_rate: float
    total_count: int = 0
    distinct_count: int = 0

    @property
    def collision_percent(self) -> float:
        """The collision rate expressed as a percentage."""
        return self.collision_rate * 100

    def to_dict(self) -> Dict[str, Any]:
        data = self._base_dict()
        data.update(
            {
                "max_hash": self.max_hash,
                "min_hash": self.min_hash,
                "multiplier": self.multiplier,
                "collision_count": self.collision_count,
                "collision_rate": self.collision_rate,
                "total_count": self.total_count,
                "distinct_count": self.distinct_count,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RateInfo":
        cls._check_type(data)
        return cls(
            max_hash=data["max_hash"],
            min_hash=data["min_hash"],
            multiplier=data["multiplier"],
            collision_count=data["collision_count"],
            collision_rate=data["collision_rate"],
            total_count=data.get("total_count", 0),
            distinct_count=data.get("distinct_count", 0),
        )

    def get_stats(self) -> Dict[str, Any]:
        stats = super().get_stats()
        stats.update(self.to_dict())
        stats["collision_percent"] = self.collision_percent
        stats["hash_span"] = self.max_hash - self.min_hash
        return stats


def hash_collision_rate(multiplier: int, hash_values: Sequence[int]) -> RateInfo:
    """
    Summarise the hash values produced by one multiplier.

    Args:
        multiplier: The multiplier the values were computed with.
        hash_values: One hash value per word.

    Returns:
        The RateInfo for these values.

    Raises:
        EmptyInputError: If hash_values is empty.
    """
    total = len(hash_values)
    if total == 0:
        raise EmptyInputError(
            f"Cannot compute collision rate for multiplier {multiplier}: no hash values"
        )

    distinct = len(set(hash_values))
    collision_count = total - distinct

    return RateInfo(
        max_hash=max(hash_values),
        min_hash=min(hash_values),
        multiplier=multiplier,
        collision_count=collision_count,
        collision_rate=collision_count / total,
        total_count=total,
        distinct_count=distinct,
    )


def collision_rate_list(
    words: Iterable[str], multipliers: Iterable[int]
) -> List[RateInfo]:
    """
    Compute collision figures for each multiplier over the same words.

    Every multiplier is evaluated independently against one snapshot of the
    words; the input collections are never modified.

    Args:
        words: The corpus, normally a set of distinct words.
        multipliers: Multipliers to evaluate, in the order results are wanted.

    Returns:
        One RateInfo per multiplier, in input order. An empty multiplier
        sequence yields an empty list.

    Raises:
        EmptyInputError: If there are no words and at least one multiplier.
    """
    multipliers = list(multipliers)
    if not multipliers:
        return []

    word_list = list(words)
    if not word_list:
        raise EmptyInputError("Cannot compute collision rates over an empty word set")

    rates = []
    for multiplier in multipliers:
        rate = hash_collision_rate(multiplier, hash_all(word_list, multiplier))
        logger.debug(
            "multiplier %d: %d words, %d collisions (%.4f%%)",
            multiplier,
            rate.total_count,
            rate.collision_count,
            rate.collision_percent,
        )
        rates.append(rate)
    return rates
