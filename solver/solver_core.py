"""Core Sudoku search: index math, house value sets, grid copy helpers and the recursive backtracking solver."""

# solver_core.py
# Plain depth-first backtracking:
# - cells are visited in row-major order
# - candidates 1..9 are tried in ascending order
# - a candidate is feasible when it is absent from its row, column and box
# Grid is 9x9 list of lists of ints (0..9). 0 = blank. Indices are 0-based here.

from __future__ import annotations

from types_sudoku import Cell, Grid, SearchStats, SolveResult, Solved, Unsolvable

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def count_givens(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v != 0)


def box_origin(r: int, c: int) -> Cell:
    return (r // BOX) * BOX, (c // BOX) * BOX


def row_cells(r: int) -> list[Cell]:
    return [(r, j) for j in range(SIZE)]


def col_cells(c: int) -> list[Cell]:
    return [(i, c) for i in range(SIZE)]


def box_cells(r: int, c: int) -> list[Cell]:
    """Cells of the box holding (r, c), row-major."""
    r0, c0 = box_origin(r, c)
    return [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]


def units() -> list[tuple[str, list[Cell]]]:
    """All 27 houses as (name, cells): rows r1..r9, then columns c1..c9, then boxes b1..b9."""
    out = [(f"r{k + 1}", row_cells(k)) for k in range(SIZE)]
    out += [(f"c{k + 1}", col_cells(k)) for k in range(SIZE)]
    out += [(f"b{k + 1}", box_cells((k // BOX) * BOX, (k % BOX) * BOX)) for k in range(SIZE)]
    return out


def _values(grid: Grid, cells: list[Cell]) -> set:
    return {grid[r][c] for r, c in cells} - {0}


def row_values(grid: Grid, r: int) -> set:
    return _values(grid, row_cells(r))


def col_values(grid: Grid, c: int) -> set:
    return _values(grid, col_cells(c))


def box_values(grid: Grid, r: int, c: int) -> set:
    return _values(grid, box_cells(r, c))


def is_valid_move(grid: Grid, r: int, c: int, digit: int) -> bool:
    """True if `digit` is not already present in the row, column or box of (r, c)."""
    return not (
        digit in row_values(grid, r)
        or digit in col_values(grid, c)
        or digit in box_values(grid, r, c)
    )


def givens_consistent(grid: Grid) -> bool:
    """True if no digit repeats inside any row, column or box; blanks are ignored."""
    for _, cells in units():
        filled = sum(1 for r, c in cells if grid[r][c] != 0)
        if len(_values(grid, cells)) != filled:
            return False
    return True


def next_cell(r: int, c: int) -> Cell | None:
    """Row-major successor of (r, c); None after the last cell."""
    if c == SIZE - 1:
        r, c = r + 1, 0
    else:
        c += 1
    if r == SIZE:
        return None
    return r, c


def place(grid: Grid, r: int, c: int, digit: int) -> Grid:
    """Returns a new grid with the digit placed; the input grid is left untouched."""
    g2 = clone_grid(grid)
    g2[r][c] = digit
    return g2


def _advance(grid: Grid, r: int, c: int, stats: SearchStats | None) -> SolveResult:
    nxt = next_cell(r, c)
    if nxt is None:
        # Placements were checked when written; the finished board is not re-validated.
        return Solved(grid)
    return _search(grid, nxt[0], nxt[1], stats)


def _search(grid: Grid, r: int, c: int, stats: SearchStats | None) -> SolveResult:
    if stats is not None:
        stats.nodes += 1

    if grid[r][c] != 0:
        return _advance(grid, r, c, stats)

    for digit in DIGITS:
        if not is_valid_move(grid, r, c, digit):
            continue
        if stats is not None:
            stats.placements += 1
        # Same cell again: it is now filled, so the next step advances past it.
        result = _search(place(grid, r, c, digit), r, c, stats)
        if isinstance(result, Solved):
            return result
    return Unsolvable()


def solve(grid: Grid, stats: SearchStats | None = None) -> SolveResult:
    """Solve `grid` by backtracking.

    Returns Solved(grid) with the first completion found, or Unsolvable() when
    every candidate sequence fails. The caller's grid is never mutated; each
    placement works on a fresh copy, so sibling branches never see each other's
    digits. Recursion depth is bounded by the 81 cells (plus one frame per
    placement on the same cell).

    Givens that already clash while blanks remain can never be completed;
    such a board is Unsolvable before any search. A board with no blanks is
    returned as given, clashing or not.
    """
    work = clone_grid(grid)
    if any(0 in row for row in work) and not givens_consistent(work):
        return Unsolvable()
    return _search(work, 0, 0, stats)
