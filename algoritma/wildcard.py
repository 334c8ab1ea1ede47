"""Wildcard pattern matching with ``?`` and ``*``."""

from __future__ import annotations


def wildcard_match(text: str, pattern: str) -> bool:
    """Return True if ``pattern`` matches the whole of ``text``.

    ``?`` matches any single character and ``*`` any run of characters,
    including none; every other character matches itself.
    """
    # previous[j]: whether the text read so far matches pattern[:j]
    previous = [True]
    for symbol in pattern:
        previous.append(previous[-1] and symbol == "*")

    for char in text:
        current = [False]
        for symbol, diagonal, above in zip(pattern, previous, previous[1:]):
            if symbol == "*":
                current.append(current[-1] or above)
            else:
                current.append(diagonal and (symbol == "?" or symbol == char))
        previous = current

    return previous[-1]