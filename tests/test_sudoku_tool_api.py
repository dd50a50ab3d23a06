# tests/test_sudoku_tool_api.py
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app
from conftest import PUZZLE

client = TestClient(app)


def test_solve_endpoint(puzzle_grid, solution_grid):
    r = client.post("/solve", json={"grid": puzzle_grid})
    assert r.status_code == 200
    body = r.json()
    assert body["solved"] is True
    assert body["grid"] == solution_grid


def test_solve_endpoint_verify_rejects_duplicates():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = grid[0][5] = 5
    r = client.post("/solve", json={"grid": grid, "verify": True})
    assert r.status_code == 200
    body = r.json()
    assert body["solved"] is False
    assert body["grid"] is None
    assert body["check"]["ok"] is False


def test_solve_endpoint_rejects_bad_shape():
    assert client.post("/solve", json={"grid": [[0] * 9] * 8}).status_code == 422
    assert client.post("/solve", json={"grid": [[0] * 9] * 8 + [[0] * 8]}).status_code == 422
    assert client.post("/solve", json={"grid": [[10] * 9] * 9}).status_code == 422


def test_parse_endpoint(puzzle_grid):
    r = client.post("/parse", json={"text": "\n".join(PUZZLE) + "\n"})
    assert r.status_code == 200
    assert r.json() == {"grid": puzzle_grid}


def test_parse_endpoint_format_error():
    r = client.post("/parse", json={"text": "\n".join(PUZZLE[:8])})
    assert r.status_code == 400
    assert r.json()["detail"] == "Error reading file: line `9` missing"


def test_sanity_check_endpoint(puzzle_grid):
    current = [row[:] for row in puzzle_grid]
    current[0][0] = 3
    r = client.post("/sanity_check", json={"original": puzzle_grid, "current": current})
    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is False
    assert body["issues"][0]["type"] == "given_overwritten"


def test_parse_endpoint_crlf_short_line():
    lines = list(PUZZLE)
    lines[2] = "53007000"
    r = client.post("/parse", json={"text": "\r\n".join(lines) + "\r\n"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Error reading file: line `3` expected 9 column values, found 8"


def test_solve_endpoint_duplicate_givens_without_verify():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = grid[0][5] = 5
    body = client.post("/solve", json={"grid": grid}).json()
    assert body["solved"] is False
    assert "check" not in body
