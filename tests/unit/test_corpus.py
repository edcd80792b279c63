"""
Unit tests for word list loading.
"""

import os
import tempfile
import unittest

from hash_spread.corpus import load_words, read_words


class TestCorpus(unittest.TestCase):
    """Test cases for read_words and load_words."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, name, content, encoding="utf-8"):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding=encoding) as handle:
            handle.write(content)
        return path

    def test_read_words_strips_and_deduplicates(self):
        lines = ["apple\n", "  banana  \n", "\n", "apple\n", "\t\n", "cherry"]
        self.assertEqual(read_words(lines), {"apple", "banana", "cherry"})

    def test_read_words_empty(self):
        self.assertEqual(read_words([]), set())

    def test_load_words(self):
        path = self._write("words.txt", "zebra\nant\nant\n\nhello\r\n")
        self.assertEqual(load_words(path), {"zebra", "ant", "hello"})

    def test_load_words_encoding(self):
        path = self._write("latin.txt", "café\nnaïve\n", encoding="latin-1")
        self.assertEqual(load_words(path, encoding="latin-1"), {"café", "naïve"})

    def test_load_empty_file(self):
        path = self._write("empty.txt", "")
        self.assertEqual(load_words(path), set())

    def test_missing_file(self):
        with self.assertRaises(OSError):
            load_words(os.path.join(self.tmpdir.name, "missing.txt"))


if __name__ == "__main__":
    unittest.main()
