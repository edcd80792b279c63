"""
Unit tests for the multiplicative hash function.
"""

import unittest

from hash_spread.core.hash import (
    INT32_MAX,
    INT32_MIN,
    char_codes,
    hash_all,
    multiplicative_hash,
    to_int32,
)


class TestToInt32(unittest.TestCase):
    """Test cases for the 32-bit wraparound helper."""

    def test_in_range_values_unchanged(self):
        for value in (0, 1, -1, INT32_MAX, INT32_MIN, 123456, -98765):
            self.assertEqual(to_int32(value), value)

    def test_wraparound(self):
        self.assertEqual(to_int32(INT32_MAX + 1), INT32_MIN)
        self.assertEqual(to_int32(INT32_MIN - 1), INT32_MAX)
        self.assertEqual(to_int32(2**32), 0)
        self.assertEqual(to_int32(2**32 + 5), 5)
        self.assertEqual(to_int32(0xFFFFFFFF), -1)


class TestCharCodes(unittest.TestCase):
    """Test cases for the 16-bit character model."""

    def test_ascii(self):
        self.assertEqual(list(char_codes("abc")), [97, 98, 99])

    def test_bmp_character(self):
        self.assertEqual(list(char_codes("é中")), [0xE9, 0x4E2D])

    def test_supplementary_character_becomes_surrogate_pair(self):
        # U+1F600 is encoded in UTF-16 as D83D DE00
        self.assertEqual(list(char_codes("\U0001F600")), [0xD83D, 0xDE00])

    def test_empty(self):
        self.assertEqual(list(char_codes("")), [])


class TestMultiplicativeHash(unittest.TestCase):
    """Test cases for multiplicative_hash."""

    def test_reproducibility(self):
        """Test that the hash is deterministic for every multiplier."""
        test_cases = ["hello world", "python", "", "a" * 100, "Zürich"]

        for text in test_cases:
            for multiplier in (1, 2, 31, 199, -7):
                self.assertEqual(
                    multiplicative_hash(text, multiplier),
                    multiplicative_hash(text, multiplier),
                    f"Different results for the same input: {text!r}, {multiplier}",
                )

    def test_empty_string_hashes_to_zero(self):
        for multiplier in (0, 1, 2, 31, 32, 199, -1, 2**40):
            self.assertEqual(multiplicative_hash("", multiplier), 0)

    def test_known_value_abc(self):
        # 97 * 31^2 + 98 * 31 + 99
        self.assertEqual(multiplicative_hash("abc", 31), 96354)

    def test_matches_string_hash_code_values(self):
        """Multiplier 31 reproduces the classic String.hashCode results."""
        self.assertEqual(multiplicative_hash("hello", 31), 99162322)
        self.assertEqual(multiplicative_hash("Aa", 31), 2112)
        self.assertEqual(multiplicative_hash("BB", 31), 2112)
        self.assertEqual(multiplicative_hash("\U0001F600", 31), 1772899)

    def test_overflow_wraps_to_signed(self):
        """Overflow wraps silently instead of growing or raising."""
        self.assertEqual(multiplicative_hash("polygenelubricants", 31), INT32_MIN)

        long_text = "the quick brown fox jumps over the lazy dog" * 50
        value = multiplicative_hash(long_text, 199)
        self.assertGreaterEqual(value, INT32_MIN)
        self.assertLessEqual(value, INT32_MAX)

    def test_single_character(self):
        for multiplier in (0, 1, 31, 12345):
            self.assertEqual(multiplicative_hash("a", multiplier), 97)

    def test_multiplier_one_sums_codes(self):
        self.assertEqual(multiplicative_hash("ab", 1), 97 + 98)
        self.assertEqual(multiplicative_hash("ab", 1), multiplicative_hash("ba", 1))

    def test_multiplier_zero_keeps_last_code(self):
        self.assertEqual(multiplicative_hash("xyz", 0), ord("z"))

    def test_multiplier_congruent_mod_2_32(self):
        """Only the low 32 bits of the multiplier matter."""
        for text in ("hello", "polygenelubricants", "Zürich"):
            self.assertEqual(
                multiplicative_hash(text, 31), multiplicative_hash(text, 31 + 2**32)
            )
            self.assertEqual(
                multiplicative_hash(text, -1), multiplicative_hash(text, 0xFFFFFFFF)
            )

    def test_even_multiplier_loses_early_characters(self):
        """Multiplying by 32 pushes all but the last seven characters out of the word."""
        prefix_a = "a" * 7
        prefix_b = "b" * 7
        self.assertEqual(
            multiplicative_hash(prefix_a + "suffixes", 32),
            multiplicative_hash(prefix_b + "suffixes", 32),
        )
        self.assertNotEqual(
            multiplicative_hash(prefix_a + "suffixes", 31),
            multiplicative_hash(prefix_b + "suffixes", 31),
        )


class TestHashAll(unittest.TestCase):
    """Test cases for hash_all."""

    def test_preserves_order(self):
        words = ["a", "b", "abc"]
        self.assertEqual(hash_all(words, 31), [97, 98, 96354])

    def test_empty(self):
        self.assertEqual(hash_all([], 31), [])

    def test_does_not_mutate_input(self):
        words = frozenset(["one", "two", "three"])
        hash_all(words, 31)
        self.assertEqual(words, frozenset(["one", "two", "three"]))


if __name__ == "__main__":
    unittest.main()
