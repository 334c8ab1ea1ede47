"""Sudoku solver by backtracking, with a terminal display of the grid."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

SIZE = 9
BOX = 3
HIGHLIGHT = "\033[93m"
RESET = "\033[0m"

PUZZLE = (
    (5, 3, 0, 0, 7, 0, 0, 0, 0),
    (6, 0, 0, 1, 9, 5, 0, 0, 0),
    (0, 9, 8, 0, 0, 0, 0, 6, 0),
    (8, 0, 0, 0, 6, 0, 0, 0, 3),
    (4, 0, 0, 8, 0, 3, 0, 0, 1),
    (7, 0, 0, 0, 2, 0, 0, 0, 6),
    (0, 6, 0, 0, 0, 0, 2, 8, 0),
    (0, 0, 0, 4, 1, 9, 0, 0, 5),
    (0, 0, 0, 0, 8, 0, 0, 7, 9),
)

Grid = Sequence[Sequence[int]]


def _checked_copy(grid: Grid) -> list[list[int]]:
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("a sudoku grid has 9 rows of 9 cells")
    if any(not 0 <= value <= SIZE for row in grid for value in row):
        raise ValueError("sudoku cells hold 0 (empty) to 9")
    return [list(row) for row in grid]


def is_possible(grid: Grid, row: int, col: int, number: int) -> bool:
    """Return True if ``number`` is in neither the row, column nor box of a cell."""
    if number in grid[row] or any(line[col] == number for line in grid):
        return False
    top, left = row // BOX * BOX, col // BOX * BOX
    return all(number not in line[left : left + BOX] for line in grid[top : top + BOX])


def solve_sudoku(grid: Grid) -> list[list[int]] | None:
    """Return a solved copy of ``grid`` (0 marks an empty cell), or None."""
    board = _checked_copy(grid)
    blanks = [
        (r, c) for r, line in enumerate(board) for c, value in enumerate(line) if value == 0
    ]

    def fill(index: int) -> bool:
        if index == len(blanks):
            return True
        row, col = blanks[index]
        for number in range(1, SIZE + 1):
            if is_possible(board, row, col, number):
                board[row][col] = number
                if fill(index + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None


def format_grid(grid: Grid, starting: Grid | None = None, color: bool = True) -> str:
    """Render a grid in 3x3 blocks, highlighting cells that differ from ``starting``."""
    if starting is None:
        starting = grid
    parts = []
    for row_number, (line, start_line) in enumerate(zip(grid, starting), start=1):
        for col_number, (value, original) in enumerate(zip(line, start_line), start=1):
            if color and value != original:
                parts.append(f"{HIGHLIGHT}{value}{RESET} ")
            else:
                parts.append(f"{value} ")
            if col_number % BOX == 0:
                parts.append("\t")
        parts.append("\n")
        if row_number % BOX == 0:
            parts.append("\n")
    return "".join(parts)


def _parse_puzzle(text: str) -> list[list[int]]:
    cells = [ch for ch in text if not ch.isspace()]
    if len(cells) != SIZE * SIZE or any(ch != "." and not ch.isdigit() for ch in cells):
        raise ValueError("a puzzle is 81 digits, with 0 or . for empty cells")
    values = [0 if ch == "." else int(ch) for ch in cells]
    return [values[start : start + SIZE] for start in range(0, SIZE * SIZE, SIZE)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print a puzzle and its solution."""
    parser = argparse.ArgumentParser(prog="sudoku", description="Solve a sudoku.")
    parser.add_argument(
        "puzzle", nargs="?", help="81 digits, row by row, with 0 or . for empty cells"
    )
    parser.add_argument("--no-color", action="store_true", help="plain output")
    args = parser.parse_args(argv)

    try:
        puzzle = _parse_puzzle(args.puzzle) if args.puzzle else [list(r) for r in PUZZLE]
        solution = solve_sudoku(puzzle)
    except ValueError as exc:
        parser.error(str(exc))

    color = not args.no_color
    print(format_grid(puzzle, color=color), end="")
    print("solusi")
    if solution is None:
        print("Error: solusi tidak ditemukan")
        return 1
    print(format_grid(solution, puzzle, color=color), end="")
    return 0