[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoritma"
version = "0.1.0"
description = "Classic algorithms and data structures: bit tricks, fast power, sorting, backtracking solvers, trees, lists and small class examples."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "backtracking",
    "sorting",
    "sudoku",
    "knight-tour",
    "minimax",
    "wildcard",
    "binary-search-tree",
    "linked-list",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
algoritma-knight-tour = "algoritma.knight_tour:main"
algoritma-minimax = "algoritma.minimax:main"
algoritma-sudoku = "algoritma.sudoku:main"

[tool.hatch.build.targets.wheel]
packages = ["algoritma"]

[tool.hatch.build.targets.sdist]
include = ["algoritma", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
