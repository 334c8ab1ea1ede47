# algoritma

A small collection of classic algorithms and data structures in plain Python,
with no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algoritma.bits` | `count_set_bits` (signed 64-bit, negatives in two's complement), `bit_count`, `hamming_distance` (two integers or two equal-length strings) |
| `algoritma.power` | `power_recursive`, `power_linear`: exponentiation by squaring with an integer exponent, negative exponents included; both return a float |
| `algoritma.kadane` | `max_subarray_sum`: largest sum of a non-empty contiguous run |
| `algoritma.sorting` | `bead_sort` (non-negative integers only), `bubble_sort`; both return a new list |
| `algoritma.knight_tour` | `is_safe`, `knight_tour`: a knight's tour found by backtracking, or `None` |
| `algoritma.minimax` | `minimax` over the leaf scores of a complete binary game tree |
| `algoritma.rat_maze` | `solve_maze`: a path from the top-left to the bottom-right cell moving only right or down, or `None` |
| `algoritma.subarray_sum` | `subarray_sum`: how many contiguous runs add up to a target |
| `algoritma.sudoku` | `is_possible`, `solve_sudoku`, `format_grid` |
| `algoritma.wildcard` | `wildcard_match`: whole-string matching with `*` and `?` |
| `algoritma.bst` | `BinarySearchTree` with `insert`, `remove`, membership, `len`, and `breadth_first`, `preorder`, `inorder`, `postorder` traversals |
| `algoritma.linked_list` | `LinkedList`, a singly linked list with `append`, `prepend`, iteration and `len` |
| `algoritma.shapes` | `Motion` (`speed`), `Accumulator` (`add`, `total`), `Shape`, `Rectangle`, `Triangle` (`area`) |

Invalid input raises an exception: for example `ValueError` for a sudoku grid
that is not 9×9, a negative value given to `bead_sort`, or an empty sequence
given to `max_subarray_sum`, and `KeyError` when `BinarySearchTree.remove` is
asked for a value the tree does not hold.

## Examples

```python
from algoritma.bits import count_set_bits, hamming_distance
from algoritma.subarray_sum import subarray_sum
from algoritma.wildcard import wildcard_match
from algoritma.sorting import bead_sort

count_set_bits(4)                            # 1
hamming_distance(11, 2)                      # 2
hamming_distance("karolin", "kathrin")       # 3
subarray_sum(0, [-7, -3, -2, 5, 8])          # 1
wildcard_match("baaabab", "*****ba*****ab")  # True
bead_sort([5, 4, 2, 1, 5, 7, 8])             # [1, 2, 4, 5, 5, 7, 8]
```

```python
from algoritma.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)
tree.remove(30)
list(tree.inorder())       # [20, 40, 50, 60, 70]
40 in tree                 # True
```

```python
from algoritma.shapes import Accumulator, Rectangle, Triangle

acc = Accumulator()
acc.add(2)
acc.add(3)
acc.total                  # 5
Rectangle(10, 4).area()    # 40
Triangle(12, 6).area()     # 36
```

## Command line

Three commands are installed:

```
algoritma-knight-tour [SIZE] [--row ROW] [--col COL]
algoritma-minimax [SCORE ...]
algoritma-sudoku [PUZZLE] [--no-color]
```

- `algoritma-knight-tour` prints a knight's tour of a board (8×8 by default,
  starting in the top-left corner), one row per line, or an error message and
  exit status 1 when no tour exists.
- `algoritma-minimax` prints the minimax value of the given leaf scores, whose
  count must be a power of two. Without arguments it uses
  `90 23 6 33 21 65 123 34423` and prints `Optimasi value: 65`.
- `algoritma-sudoku` prints a puzzle and its solution, highlighting filled-in
  cells in colour unless `--no-color` is given. The puzzle is 81 characters, row
  by row, with `0` or `.` for empty cells; without one, a sample puzzle is used.

## What it does not do

The binary search tree and the linked list are library classes only; there is
no interactive command for building or browsing them.