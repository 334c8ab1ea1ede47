"""Knight's tour on a square board, found by backtracking."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

KNIGHT_MOVES = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

UNVISITED = -1


def is_safe(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Return True if ``(row, col)`` lies on the square board and is unvisited."""
    size = len(board)
    return 0 <= row < size and 0 <= col < size and board[row][col] == UNVISITED


def knight_tour(
    size: int = 8, start_row: int = 0, start_col: int = 0
) -> list[list[int]] | None:
    """Find a knight's tour that visits every square exactly once.

    Returns the board with the move number of every square, the start
    square holding 0, or None when no tour exists from that square.
    """
    if size < 1:
        raise ValueError("the board needs at least one square")
    if not (0 <= start_row < size and 0 <= start_col < size):
        raise ValueError("the start square lies outside the board")

    board = [[UNVISITED] * size for _ in range(size)]
    board[start_row][start_col] = 0
    squares = size * size

    def extend(row: int, col: int, move: int) -> bool:
        if move == squares:
            return True
        for d_row, d_col in KNIGHT_MOVES:
            nxt_row, nxt_col = row + d_row, col + d_col
            if is_safe(board, nxt_row, nxt_col):
                board[nxt_row][nxt_col] = move
                if extend(nxt_row, nxt_col, move + 1):
                    return True
                board[nxt_row][nxt_col] = UNVISITED
        return False

    return board if extend(start_row, start_col, 1) else None


def main(argv: Sequence[str] | None = None) -> int:
    """Print a knight's tour, or an error when none exists."""
    parser = argparse.ArgumentParser(
        prog="knight-tour", description="Find a knight's tour by backtracking."
    )
    parser.add_argument("size", nargs="?", type=int, default=8, help="board size")
    parser.add_argument("--row", type=int, default=0, help="start row")
    parser.add_argument("--col", type=int, default=0, help="start column")
    args = parser.parse_args(argv)

    try:
        board = knight_tour(args.size, args.row, args.col)
    except ValueError as exc:
        parser.error(str(exc))

    if board is None:
        print("Error: solusi tidak ditemukan")
        return 1
    for row in board:
        print("".join(f"{cell}  " for cell in row))
    return 0