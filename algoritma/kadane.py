"""Kadane's algorithm for the largest sum of a contiguous subarray."""

from __future__ import annotations

from collections.abc import Iterable


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of any non-empty contiguous run of ``values``."""
    best: int | None = None
    ending_here = 0
    for value in values:
        ending_here += value
        if best is None or ending_here > best:
            best = ending_here
        if ending_here < 0:
            ending_here = 0
    if best is None:
        raise ValueError("max_subarray_sum needs at least one value")
    return best