"""Tool-friendly wrappers around the solver: sanity checking of a grid against its givens, and a JSON-ready solve call shared by the CLI and the HTTP API."""

# sudoku_tools.py
from __future__ import annotations

from typing import Dict, List, Optional

from types_sudoku import Grid, Issue, SearchStats, SolvePayload, SolveResult, Solved, Unsolvable

from .solver_core import SIZE, solve, units
from .sudoku_io import NO_SOLUTION, format_result


def rc_to_key(r: int, c: int) -> str:
    """1-based cell key, e.g. rc_to_key(1, 1) == 'r1c1'."""
    return f"r{r}c{c}"


def _duplicates(vals: List[int]) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def sanity_check(original: Grid, current: Grid) -> Dict:
    """Report givens of `original` that changed in `current`, and duplicate digits
    in any row, column or box of `current`. Blank cells are never an issue."""
    issues: List[Issue] = []
    for r in range(SIZE):
        for c in range(SIZE):
            given = original[r][c]
            if given != 0 and current[r][c] not in (0, given):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r + 1, c + 1),
                               "given": given, "found": current[r][c]})
    for name, cells in units():
        dups = _duplicates([current[r][c] for r, c in cells])
        if dups:
            bad = [rc_to_key(r + 1, c + 1) for r, c in cells if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": name, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def solve_tool(grid: Grid, verify: bool = False, stats: Optional[SearchStats] = None) -> SolvePayload:
    """Solve `grid` and return {'solved', 'grid', 'text', 'stats'}.

    With `verify=True` the givens are run through sanity_check before the
    search and the finished grid after it; a failing report is included under
    'check' and the puzzle is reported as unsolved. Clashing givens on a board
    with blanks are rejected either way; verification adds the report and also
    rejects a fully given inconsistent grid instead of echoing it back.
    """
    if stats is None:
        stats = SearchStats()
    payload: SolvePayload = {}

    result: SolveResult = Unsolvable()
    check = sanity_check(grid, grid) if verify else None
    if check is None or check["ok"]:
        result = solve(grid, stats)
        if verify and isinstance(result, Solved):
            check = sanity_check(grid, result.grid)
            if not check["ok"]:
                result = Unsolvable()
    if check is not None:
        payload["check"] = check

    if isinstance(result, Solved):
        payload.update(solved=True, grid=result.grid, text=format_result(result))
    else:
        payload.update(solved=False, grid=None, text=NO_SOLUTION)
    payload["stats"] = {"nodes": stats.nodes, "placements": stats.placements}
    return payload
