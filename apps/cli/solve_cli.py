"""Command-line entry point: load a puzzle file, solve it, print the grid or 'No valid solution'."""

# solve_cli.py
# Usage:
#   sudoku-solve puzzle.txt
#   python -m apps.cli.solve_cli puzzle.txt --verify --json --verbose
#
# Exit status: 0 when a result was printed (solved or not), 1 on usage or input errors.

from __future__ import annotations

import argparse
import json
import sys
import time
from typing import List, Optional

from solver.solver_core import count_givens
from solver.sudoku_io import PuzzleFileError, load_grid
from solver.sudoku_tools import solve_tool
from types_sudoku import SearchStats


def ts() -> str:
    return time.strftime("%Y-%m-%d %H:%M:%S")


def log(msg: str, *, quiet: bool = False) -> None:
    # stdout carries the result only
    if not quiet:
        print(f"[{ts()}] {msg}", file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sudoku-solve",
        description="Solve a 9x9 Sudoku read from a text file (9 lines, first 9 characters each).",
    )
    ap.add_argument("filename", nargs="?", help="Puzzle file; digits 1-9 are givens, anything else is blank")
    ap.add_argument("--verify", action="store_true",
                    help="Re-check the finished grid and report an inconsistent one as unsolved")
    ap.add_argument("--json", action="store_true", help="Print a JSON payload instead of the plain grid")
    ap.add_argument("--verbose", action="store_true", help="Progress lines on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args, extra = ap.parse_known_args(argv)
    quiet = not args.verbose

    if args.filename is None:
        print("Missing filename argument", file=sys.stderr)
        return 1
    if extra:
        log(f"ignoring extra arguments: {' '.join(extra)}", quiet=quiet)

    try:
        grid = load_grid(args.filename)
    except PuzzleFileError as e:
        print(e, file=sys.stderr)
        return 1
    log(f"loaded {args.filename}: {count_givens(grid)} givens", quiet=quiet)

    stats = SearchStats()
    t0 = time.time()
    payload = solve_tool(grid, verify=args.verify, stats=stats)
    log(f"search finished in {time.time() - t0:.3f}s: solved={payload['solved']}, "
        f"nodes={stats.nodes:,}, placements={stats.placements:,}", quiet=quiet)

    check = payload.get("check")
    if check is not None and not check["ok"]:
        for issue in check["issues"]:
            log(f"verify: {issue}", quiet=False)

    if args.json:
        payload["givens"] = grid
        print(json.dumps(payload, indent=2))
    else:
        print(payload["text"])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
