"""Classic algorithms and data structures: bit tricks, fast power, sorting, backtracking solvers, trees, lists and small class examples."""

__version__ = "0.1.0"