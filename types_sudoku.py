# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypedDict, Union

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""(row, col), 0-based inside the solver."""


@dataclass(frozen=True)
class Solved:
    """Search reached the last cell; `grid` is the completed board."""

    grid: Grid


@dataclass(frozen=True)
class Unsolvable:
    """Every candidate sequence was exhausted."""


SolveResult = Union[Solved, Unsolvable]


@dataclass
class SearchStats:
    nodes: int = 0  # calls of the recursive step
    placements: int = 0  # feasible candidates written into a copy of the grid


class Issue(TypedDict, total=False):
    """One problem reported by the sanity check."""

    type: str  # 'given_overwritten' or 'duplicate'
    cell: str  # for given_overwritten, e.g. 'r4c7'
    given: int
    found: int
    unit: str  # for duplicate, e.g. 'r3', 'c5', 'b9'
    digits: list[int]
    cells: list[str]


class SolvePayload(TypedDict, total=False):
    """JSON-friendly result shared by the CLI (--json) and the HTTP API."""

    solved: bool
    grid: Grid | None
    text: str
    stats: dict[str, int]
    check: dict[str, Any]
    givens: Grid  # the loaded puzzle, CLI --json only
