# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


PUZZLE = [
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
]

SOLUTION = [
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
]


def to_grid(lines):
    return [[int(ch) for ch in line] for line in lines]


def empty_grid():
    return [[0] * 9 for _ in range(9)]


def assert_complete_and_valid(grid):
    digits = set(range(1, 10))
    for r in range(9):
        assert set(grid[r]) == digits, f"row {r}"
    for c in range(9):
        assert {grid[r][c] for r in range(9)} == digits, f"col {c}"
    for r0 in (0, 3, 6):
        for c0 in (0, 3, 6):
            box = {grid[r0 + i][c0 + j] for i in range(3) for j in range(3)}
            assert box == digits, f"box {r0},{c0}"


@pytest.fixture
def puzzle_grid():
    return to_grid(PUZZLE)


@pytest.fixture
def solution_grid():
    return to_grid(SOLUTION)


@pytest.fixture
def write_puzzle(tmp_path):
    """Write text to a puzzle file and return its path."""

    def _write(text, name="puzzle.txt"):
        p = tmp_path / name
        if isinstance(text, bytes):
            p.write_bytes(text)
        else:
            p.write_text(text, encoding="utf-8", newline="")
        return p

    return _write
