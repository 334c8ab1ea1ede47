"""Minimax over a complete binary game tree stored as its leaf scores."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

DEFAULT_SCORES = (90, 23, 6, 33, 21, 65, 123, 34423)


def _tree_height(leaves: int) -> int:
    if leaves < 1 or leaves & (leaves - 1):
        raise ValueError("the number of scores must be a power of two")
    return leaves.bit_length() - 1


def minimax(
    scores: Sequence[int],
    depth: int = 0,
    node_index: int = 0,
    is_max: bool = True,
    height: int | None = None,
) -> int:
    """Return the optimal value of the game tree whose leaves are ``scores``.

    ``height`` defaults to log2 of the number of scores; the player at
    ``depth`` maximises when ``is_max`` is true and the players alternate.
    """
    if height is None:
        height = _tree_height(len(scores))
    if depth > height:
        raise ValueError("depth lies below the leaves of the tree")

    def search(level: int, index: int, maximising: bool) -> int:
        if level == height:
            return scores[index]
        left = search(level + 1, index * 2, not maximising)
        right = search(level + 1, index * 2 + 1, not maximising)
        return max(left, right) if maximising else min(left, right)

    return search(depth, node_index, is_max)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the minimax value of the given leaf scores."""
    parser = argparse.ArgumentParser(
        prog="minimax", description="Evaluate a game tree by minimax."
    )
    parser.add_argument("scores", nargs="*", type=int, help="leaf scores")
    args = parser.parse_args(argv)
    scores = args.scores or list(DEFAULT_SCORES)
    try:
        value = minimax(scores)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Optimasi value: {value}")
    return 0