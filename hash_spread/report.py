"""
Text and JSON rendering of hash quality results.
"""

import json
from typing import Sequence, Union

from hash_spread.algorithms.buckets import BucketStatistics
from hash_spread.algorithms.collision import RateInfo
from hash_spread.core.base import HashStatistic


def format_rate_info(rate: RateInfo) -> str:
    """Render one multiplier's collision figures on a single line."""
    return (
        f"multiplier = {rate.multiplier:4d}, "
        f"min hash = {rate.min_hash:11d}, "
        f"max hash = {rate.max_hash:10d}, "
        f"collisions = {rate.collision_count:6d}, "
        f"collision rate = {rate.collision_percent:.4f}%"
    )


def format_rate_table(rates: Sequence[RateInfo]) -> str:
    """
    Render a collision table, one line per multiplier.

    The header line reports the corpus size taken from the first record.
    An empty sequence renders as an empty string.
    """
    if not rates:
        return ""
    lines = [f"words: {rates[0].total_count}"]
    lines.extend(format_rate_info(rate) for rate in rates)
    return "\n".join(lines)


def format_buckets(stats: BucketStatistics, width: int = 40) -> str:
    """
    Render a bucket histogram as text.

    Each line shows the bucket index, its half-open value range, the count
    and a bar of ``#`` scaled so the busiest bucket spans ``width`` columns.

    Raises:
        ValueError: If width is less than 1.
    """
    if width < 1:
        raise ValueError("Bar width must be at least 1")

    peak = max(stats.values())
    lines = []
    for index, count in stats.items():
        lower, upper = stats.bounds(index)
        bar = "#" * (round(count * width / peak) if peak else 0)
        lines.append(f"{index:2d} [{lower:11d}, {upper:11d}) {count:7d} {bar}".rstrip())
    if stats.dropped:
        lines.append(f"dropped: {stats.dropped}")
    return "\n".join(lines)


def to_json(
    results: Union[HashStatistic, Sequence[HashStatistic]], indent: int = 2
) -> str:
    """Serialize one result or a sequence of results to a JSON document."""
    if isinstance(results, HashStatistic):
        return json.dumps(results.to_dict(), indent=indent)
    return json.dumps([result.to_dict() for result in results], indent=indent)
