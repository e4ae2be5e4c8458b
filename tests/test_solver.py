"""Solvability parity tests.

Boards are JSON fixtures under ``tests/fixtures/``; each one is tagged with
whether it can be slid back to the goal state.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from puzzlecore.engine.gamesolver import Solver
from puzzlecore.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS = _load("boards.json")


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_is_solvable_matches_fixture(board_data: dict) -> None:
    board = Board.from_rows(board_data["tiles"])

    assert board.size == board_data["size"]
    assert Solver.is_solvable(board) is board_data["solvable"]


def test_inversions_ignore_blank() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 0, 5], [7, 8, 6]])

    assert Solver.inversions(board) == 2


def test_inversions_of_reversed_board() -> None:
    board = Board.from_rows([[3, 2], [1, 0]])

    assert Solver.inversions(board) == 3
