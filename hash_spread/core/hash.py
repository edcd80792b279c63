"""
Hashing functions for hash-spread.

This module provides the multiplicative string hash studied by the rest of the
package. All arithmetic reproduces 32-bit two's-complement wraparound, so the
results match the classic ``String.hashCode`` style polynomial hash bit for bit.
"""

from typing import Iterable, Iterator, List

INT32_MIN = -0x80000000
INT32_MAX = 0x7FFFFFFF
_MASK_32 = 0xFFFFFFFF
_SIGN_BIT_32 = 0x80000000


def to_int32(value: int) -> int:
    """
    Wrap an arbitrary Python integer into the signed 32-bit range.

    Args:
        value: Any integer.

    Returns:
        The value reduced modulo 2^32 and reinterpreted as two's complement.
    """
    value &= _MASK_32
    if value & _SIGN_BIT_32:
        return value - 0x100000000
    return value


def char_codes(text: str) -> Iterator[int]:
    """
    Yield the 16-bit code units of a string.

    Characters inside the Basic Multilingual Plane yield their code point.
    Characters above it yield a UTF-16 surrogate pair, so every value lies
    in 0..65535.
    """
    for char in text:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            yield 0xD800 + (code >> 10)
            yield 0xDC00 + (code & 0x3FF)
        else:
            yield code


def multiplicative_hash(text: str, multiplier: int) -> int:
    """
    Hash a string with the polynomial recurrence ``h = multiplier * h + c``.

    The accumulator starts at 0 and is wrapped to 32 bits after every step,
    so overflow never raises and never grows into a big integer.

    Args:
        text: The string to hash.
        multiplier: The multiplier of the recurrence. Only its value modulo
                    2^32 influences the result.

    Returns:
        Signed 32-bit hash value. The empty string hashes to 0.
    """
    m = multiplier & _MASK_32
    h = 0
    for code in char_codes(text):
        h = (m * h + code) & _MASK_32
    return to_int32(h)


def hash_all(words: Iterable[str], multiplier: int) -> List[int]:
    """Hash every word with the same multiplier, keeping iteration order."""
    return [multiplicative_hash(word, multiplier) for word in words]
