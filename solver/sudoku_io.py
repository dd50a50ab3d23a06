"""Puzzle file loading and result formatting.

A puzzle file is plain text: the first 9 lines are read and the first 9
characters of each line become one row. Digits 1..9 are givens; any other
character (0, '.', space, letters, ...) marks an empty cell. Characters past
the 9th and lines past the 9th are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from types_sudoku import Grid, SolveResult, Unsolvable

from .solver_core import SIZE

NO_SOLUTION = "No valid solution"


class PuzzleFileError(Exception):
    """Base class for every loader failure; the message is ready for stderr."""

    def __init__(self, message: str, *, path: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.line = line


class PuzzleOpenError(PuzzleFileError):
    """The file could not be opened."""


class PuzzleReadError(PuzzleFileError):
    """A line could not be read or decoded."""


class PuzzleFormatError(PuzzleFileError, ValueError):
    """A line is missing or too short."""


def _cell_value(ch: str) -> int:
    # ASCII 1..9 only; everything else is a blank.
    if len(ch) == 1 and "1" <= ch <= "9":
        return ord(ch) - ord("0")
    return 0


def parse_row(text: str, lineno: int, path: Optional[str] = None) -> list[int]:
    if len(text) < SIZE:
        raise PuzzleFormatError(
            f"Error reading file: line `{lineno}` expected {SIZE} column values, found {len(text)}",
            path=path,
            line=lineno,
        )
    return [_cell_value(ch) for ch in text[:SIZE]]


def _strip_eol(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def _missing_line(lineno: int, path: Optional[str]) -> PuzzleFormatError:
    return PuzzleFormatError(f"Error reading file: line `{lineno}` missing", path=path, line=lineno)


def parse_lines(lines: Iterable[str], path: Optional[str] = None) -> Grid:
    """Build a grid from already-decoded lines (trailing newlines are allowed)."""
    grid: Grid = []
    it = iter(lines)
    for i in range(SIZE):
        try:
            raw = next(it)
        except StopIteration:
            raise _missing_line(i + 1, path) from None
        grid.append(parse_row(_strip_eol(raw), i + 1, path))
    return grid


def parse_text(text: str) -> Grid:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()  # trailing newline, not an extra empty line
    return parse_lines(line + "\n" for line in lines)


def load_grid(path: str | Path) -> Grid:
    """Read a puzzle file into a 9x9 grid.

    Raises PuzzleOpenError, PuzzleReadError or PuzzleFormatError; the message
    names the file or the 1-based line number and the underlying cause.
    """
    name = str(path)
    try:
        fin = open(path, "rb")
    except OSError as e:
        raise PuzzleOpenError(f"Error opening file `{name}`: {e}", path=name) from e

    grid: Grid = []
    with fin:
        for i in range(SIZE):
            lineno = i + 1
            try:
                raw = fin.readline()
                text = raw.decode("utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise PuzzleReadError(
                    f"Error reading file: line `{lineno}` `{e}`", path=name, line=lineno
                ) from e
            if not raw:
                raise _missing_line(lineno, name)
            grid.append(parse_row(_strip_eol(text), lineno, name))
    return grid


def format_solution(grid: Grid) -> str:
    """One line of 9 digits per row, each line terminated by a newline."""
    return "".join("".join(str(v) for v in row) + "\n" for row in grid)


def format_result(result: SolveResult) -> str:
    if isinstance(result, Unsolvable):
        return NO_SOLUTION
    return format_solution(result.grid)
