"""
Multiplier study for hash-spread.

This example compares multipliers of the polynomial string hash on a word
list and shows why 31 is the conventional choice: small multipliers keep all
values near zero and collide often, even multipliers shift characters out of
the 32-bit word, and odd primes such as 31 spread values with few collisions.

Run with a word list (one word per line) or without arguments to use a
synthetic corpus of random words.
"""

import random
import string
import sys

from hash_spread.algorithms.buckets import bucketize
from hash_spread.algorithms.collision import DEFAULT_MULTIPLIERS, collision_rate_list
from hash_spread.corpus import load_words
from hash_spread.report import format_buckets, format_rate_table


def synthetic_words(count=20000, seed=42):
    """Random lowercase words of 3 to 10 letters."""
    rng = random.Random(seed)
    words = set()
    while len(words) < count:
        length = rng.randint(3, 10)
        words.add("".join(rng.choice(string.ascii_lowercase) for _ in range(length)))
    return words


def demonstrate_collisions(words):
    """Print the collision table for the default multipliers."""
    print("\n=== Collision Rates ===")
    rates = collision_rate_list(words, DEFAULT_MULTIPLIERS)
    print(format_rate_table(rates))

    best = min(rates, key=lambda r: (r.collision_count, r.multiplier))
    print(f"\nFewest collisions: multiplier {best.multiplier} ({best.collision_count})")


def demonstrate_dispersion(words):
    """Print bucket histograms for a poor and a good multiplier."""
    for multiplier in (2, 31):
        print(f"\n=== Bucket Distribution, multiplier {multiplier} ===")
        stats = bucketize(words, multiplier)
        print(format_buckets(stats, width=30))

        summary = stats.get_stats()
        print(f"Empty buckets: {summary['empty_buckets']} of {summary['buckets']}")
        print(f"Std dev of counts: {summary['std_dev']:.1f}")


def main():
    if len(sys.argv) > 1:
        words = load_words(sys.argv[1])
    else:
        words = synthetic_words()
    print(f"Corpus size: {len(words)} words")

    demonstrate_collisions(words)
    demonstrate_dispersion(words)


if __name__ == "__main__":
    main()
