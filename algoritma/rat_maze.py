"""Rat in a maze: a path from the top-left to the bottom-right corner."""

from __future__ import annotations

from collections.abc import Sequence

OPEN = 1


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path that moves only right or down through open cells.

    Cells equal to 1 are open; the start cell is taken as open. Returns a
    matrix marking the path with 1, or None when there is no path.
    """
    size = len(maze)
    if size == 0 or any(len(row) != size for row in maze):
        raise ValueError("the maze must be a non-empty square")

    solution = [[0] * size for _ in range(size)]
    last = size - 1

    def walk(row: int, col: int) -> bool:
        solution[row][col] = 1
        if row == last and col == last:
            return True
        if col < last and maze[row][col + 1] == OPEN and walk(row, col + 1):
            return True
        if row < last and maze[row + 1][col] == OPEN and walk(row + 1, col):
            return True
        solution[row][col] = 0
        return False

    return solution if walk(0, 0) else None