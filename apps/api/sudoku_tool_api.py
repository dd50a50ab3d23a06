# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator
from typing import List

from solver.sudoku_io import PuzzleFormatError, parse_text
from solver.sudoku_tools import sanity_check, solve_tool

app = FastAPI(title="Sudoku Solver Tool API")


def _check_grid(grid: List[List[int]]) -> List[List[int]]:
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("grid must be 9 rows of 9 values")
    if any(v < 0 or v > 9 for row in grid for v in row):
        raise ValueError("grid values must be in 0..9")
    return grid


class SolveRequest(BaseModel):
    grid: List[List[int]]
    verify: bool = False

    @field_validator("grid")
    @classmethod
    def grid_is_9x9(cls, v):
        return _check_grid(v)


class ParseRequest(BaseModel):
    text: str


class SanityRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]

    @field_validator("original", "current")
    @classmethod
    def grids_are_9x9(cls, v):
        return _check_grid(v)


@app.post("/solve")
def api_solve(req: SolveRequest):
    return solve_tool(req.grid, verify=req.verify)


@app.post("/parse")
def api_parse(req: ParseRequest):
    try:
        return {"grid": parse_text(req.text)}
    except PuzzleFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)
