"""
Word list loading.

A corpus is a plain text file with one word per line, such as the
English word lists commonly used to compare string hash functions.
"""

import logging
import os
from typing import Iterable, Set, Union

logger = logging.getLogger(__name__)


def read_words(lines: Iterable[str]) -> Set[str]:
    """
    Collect the distinct words from an iterable of lines.

    Surrounding whitespace is stripped and blank lines are skipped.
    """
    words = set()
    for line in lines:
        word = line.strip()
        if word:
            words.add(word)
    return words


def load_words(
    path: Union[str, "os.PathLike[str]"], encoding: str = "utf-8"
) -> Set[str]:
    """
    Load the distinct words of a word list file.

    Args:
        path: Path to a text file with one word per line.
        encoding: Text encoding of the file.

    Returns:
        The set of words. It may be empty; the analysers reject empty
        corpora when asked for statistics.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, encoding=encoding) as handle:
        words = read_words(handle)
    logger.info("loaded %d distinct words from %s", len(words), path)
    return words
