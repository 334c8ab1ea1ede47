"""Bit counting and Hamming distance."""

from __future__ import annotations

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MASK = (1 << 64) - 1


def count_set_bits(n: int) -> int:
    """Count the set bits of a signed 64-bit integer.

    Negative numbers are counted in their 64-bit two's complement form,
    so ``count_set_bits(-1)`` is 64.
    """
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise ValueError(f"{n} does not fit in a signed 64-bit integer")
    n &= _UINT64_MASK
    count = 0
    while n:
        count += 1
        n &= n - 1
    return count


def bit_count(value: int) -> int:
    """Count the set bits of a non-negative integer, one bit at a time."""
    if value < 0:
        raise ValueError("bit_count needs a non-negative integer")
    count = 0
    while value:
        count += value & 1
        value >>= 1
    return count


def hamming_distance(a: int | str, b: int | str) -> int:
    """Return the Hamming distance between two integers or two strings.

    For integers this is the number of differing bits; for strings, which
    must have the same length, the number of differing positions.
    """
    if isinstance(a, str) and isinstance(b, str):
        if len(a) != len(b):
            raise ValueError("strings must have the same length")
        return sum(x != y for x, y in zip(a, b))
    if isinstance(a, int) and isinstance(b, int):
        return bit_count(a ^ b)
    raise TypeError("hamming_distance needs two integers or two strings")