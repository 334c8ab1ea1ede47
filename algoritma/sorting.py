"""Bead sort and bubble sort."""

from __future__ import annotations

from collections.abc import Iterable


def bead_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers of ``values`` in ascending order.

    Each value is a row of beads; the beads of every column fall to the
    bottom rows, and each row is then read back as a value.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("bead_sort only sorts non-negative integers")
    if not items:
        return []
    tallest = max(items)
    column_heights = [sum(1 for value in items if value > column) for column in range(tallest)]
    rows = len(items)
    return [
        sum(1 for height in column_heights if height >= depth)
        for depth in range(rows, 0, -1)
    ]


def bubble_sort(values: Iterable) -> list:
    """Return the items of ``values`` in ascending order, by bubble sort."""
    items = list(values)
    n = len(items)
    for done in range(n):
        for x in range(n - done - 1):
            if items[x] > items[x + 1]:
                items[x], items[x + 1] = items[x + 1], items[x]
    return items