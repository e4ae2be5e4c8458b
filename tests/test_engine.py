"""PuzzleEngine tests: legal moves, sliding, the move gate, and the win check."""

from __future__ import annotations

import logging

import pytest

from puzzlecore.engine.gameplay import PuzzleEngine
from puzzlecore.models.board import (
    Board,
    BoardConsistencyError,
    Direction,
    InvalidBoardError,
)
from puzzlecore.models.settings import PuzzleSettings

SOLVED_4x4 = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 0]]


# -- helpers ------------------------------------------------------------------


def _first(options):
    return options[0]


def _all_cells(size: int) -> list[tuple[int, int]]:
    return [(r, c) for r in range(size) for c in range(size)]


# -- initialize ---------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5, 7])
def test_initialize_yields_goal_arrangement(size: int) -> None:
    engine = PuzzleEngine(size)

    assert engine.empty_position == (size - 1, size - 1)
    assert engine.solved is False
    assert engine.accepting_moves
    assert engine.check_solved() is True
    assert engine.solved is True


def test_initialize_resets_from_any_state() -> None:
    engine = PuzzleEngine(4, choose=_first)
    engine.shuffle(20)
    engine.player_move(*engine.legal_moves()[0])

    engine.initialize()

    assert engine.tiles == SOLVED_4x4
    assert engine.empty_position == (3, 3)
    assert engine.moves == 0
    assert engine.solved is False


def test_initialize_can_change_size() -> None:
    engine = PuzzleEngine(4)
    engine.initialize(3)

    assert engine.size == 3
    assert engine.empty_position == (2, 2)


@pytest.mark.parametrize("size", [0, 1])
def test_initialize_rejects_size_below_two(size: int) -> None:
    with pytest.raises(InvalidBoardError):
        PuzzleEngine(size)

    engine = PuzzleEngine(3)
    with pytest.raises(InvalidBoardError):
        engine.initialize(size)


# -- legal moves / adjacency --------------------------------------------------


def test_concrete_4x4_scenario() -> None:
    engine = PuzzleEngine(4)

    assert engine.tiles == SOLVED_4x4
    assert set(engine.legal_moves()) == {(2, 3), (3, 2)}

    assert engine.apply_move(2, 3) is True
    assert engine.tiles[2] == [9, 10, 11, 0]
    assert engine.tiles[3] == [13, 14, 15, 12]
    assert engine.empty_position == (2, 3)
    assert engine.check_solved() is False


def test_legal_moves_order_is_up_down_left_right() -> None:
    engine = PuzzleEngine.from_board(
        Board.from_rows([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    )

    assert engine.legal_moves() == [(0, 1), (2, 1), (1, 0), (1, 2)]


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_legal_moves_count_and_adjacency_for_every_blank(size: int) -> None:
    engine = PuzzleEngine(size)
    for r, c in _all_cells(size):
        engine.board.blank_pos = (r, c)
        moves = engine.legal_moves()

        assert 2 <= len(moves) <= 4
        assert all(engine.is_adjacent(*m) for m in moves)
        assert engine.legal_moves() == moves


def test_cell_is_never_adjacent_to_itself() -> None:
    engine = PuzzleEngine(4)

    assert not engine.is_adjacent(*engine.empty_position)


@pytest.mark.parametrize(
    "cell",
    [(2, 2), (1, 3), (3, 1), (4, 3), (3, 4), (-1, 3), (0, 0)],
    ids=["diagonal", "two-up", "two-left", "below-edge", "right-edge", "negative", "far"],
)
def test_is_adjacent_rejects(cell: tuple[int, int]) -> None:
    engine = PuzzleEngine(4)

    assert not engine.is_adjacent(*cell)


# -- apply_move ---------------------------------------------------------------


def test_apply_move_is_its_own_inverse() -> None:
    engine = PuzzleEngine(4)
    before = engine.tiles
    blank = engine.empty_position

    engine.apply_move(3, 2)
    engine.apply_move(*blank)

    assert engine.tiles == before
    assert engine.empty_position == blank


@pytest.mark.parametrize("cell", [(0, 0), (2, 2), (3, 3), (9, 9), (-1, 0)])
def test_apply_move_ignores_invalid_targets(cell: tuple[int, int]) -> None:
    engine = PuzzleEngine(4)

    assert engine.apply_move(*cell) is False
    assert engine.tiles == SOLVED_4x4
    assert engine.empty_position == (3, 3)


def test_apply_move_does_not_touch_solved_flag() -> None:
    engine = PuzzleEngine(4)
    engine.check_solved()

    engine.apply_move(2, 3)

    assert engine.solved is True


def test_apply_move_logs_applied_and_ignored_moves(caplog: pytest.LogCaptureFixture) -> None:
    engine = PuzzleEngine(4)

    with caplog.at_level(logging.DEBUG, logger="puzzlecore.engine"):
        engine.apply_move(2, 3)
        engine.apply_move(0, 0)

    assert "Slid tile from (2, 3); blank now at (2, 3)" in caplog.text
    assert "Ignored move to (0, 0)" in caplog.text


# -- player moves -------------------------------------------------------------


def test_player_move_counts_and_detects_win() -> None:
    engine = PuzzleEngine.from_board(Board.from_rows(
        [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 0], [13, 14, 15, 12]]
    ))
    assert engine.solved is False

    assert engine.player_move(3, 3) is True

    assert engine.moves == 1
    assert engine.solved is True


def test_solved_puzzle_ignores_further_moves() -> None:
    engine = PuzzleEngine(4)
    engine.check_solved()

    assert engine.player_move(2, 3) is False
    assert engine.tiles == SOLVED_4x4
    assert engine.moves == 0


def test_player_move_ignores_non_adjacent_click() -> None:
    engine = PuzzleEngine(4, choose=_first)
    engine.shuffle(3)
    before = engine.tiles

    assert engine.player_move(3, 0) is False
    assert engine.tiles == before
    assert engine.moves == 0


def test_player_move_blocked_while_gate_closed() -> None:
    engine = PuzzleEngine(4, choose=_first)
    engine.shuffle(1)
    engine.state.close_gate()

    assert engine.player_move(3, 3) is False
    assert engine.empty_position == (2, 3)


def test_player_move_resyncs_stale_blank() -> None:
    engine = PuzzleEngine(4)
    tiles = engine.board.tiles
    tiles[3][2], tiles[3][3] = tiles[3][3], tiles[3][2]
    assert engine.empty_position == (3, 3)

    assert engine.player_move(3, 3) is True
    assert engine.tiles == SOLVED_4x4
    assert engine.solved is True


def test_missing_blank_is_fatal() -> None:
    engine = PuzzleEngine(4)
    engine.board.tiles[3][3] = 16

    with pytest.raises(BoardConsistencyError):
        engine.resync_empty_position()
    with pytest.raises(BoardConsistencyError):
        engine.player_move(2, 3)


@pytest.mark.parametrize(
    "direction, blank",
    [(Direction.DOWN, (2, 3)), (Direction.RIGHT, (3, 2))],
)
def test_move_by_direction(direction: Direction, blank: tuple[int, int]) -> None:
    engine = PuzzleEngine(4)

    assert engine.move(direction) is True
    assert engine.empty_position == blank
    assert engine.moves == 1


@pytest.mark.parametrize("direction", [Direction.UP, Direction.LEFT])
def test_move_off_the_board_is_ignored(direction: Direction) -> None:
    engine = PuzzleEngine(4)

    assert engine.move(direction) is False
    assert engine.tiles == SOLVED_4x4


# -- reset / construction helpers ---------------------------------------------


def test_reset_reshuffles_from_goal() -> None:
    engine = PuzzleEngine(4, choose=_first, shuffle_moves=3)
    engine.player_move(3, 2)

    engine.reset()

    assert engine.tiles == [[1, 2, 3, 0], [5, 6, 7, 4], [9, 10, 11, 8], [13, 14, 15, 12]]
    assert engine.moves == 0
    assert engine.accepting_moves


def test_from_board_marks_solved_board() -> None:
    engine = PuzzleEngine.from_board(Board.solved(3))

    assert engine.solved is True


def test_from_board_warns_about_unsolvable(caplog: pytest.LogCaptureFixture) -> None:
    board = Board.from_rows([[2, 1], [3, 0]])

    with caplog.at_level(logging.WARNING, logger="puzzlecore.engine"):
        engine = PuzzleEngine.from_board(board)

    assert engine.size == 2
    assert "cannot reach the goal state" in caplog.text


def test_from_settings_is_repeatable_with_seed() -> None:
    settings = PuzzleSettings(size=4, shuffle_moves=50, seed=1234)

    first = PuzzleEngine.from_settings(settings)
    second = PuzzleEngine.from_settings(settings)

    assert first.tiles == second.tiles
    assert first.moves == 0
    assert first.accepting_moves


def test_tiles_accessor_returns_copy() -> None:
    engine = PuzzleEngine(3)
    grid = engine.tiles
    grid[0][0] = 42

    assert engine.board.tiles[0][0] == 1


def test_debug_snapshot_lists_moves_with_values() -> None:
    engine = PuzzleEngine(4)
    snapshot = engine.debug_snapshot()

    assert "Empty tile at: (3, 3)" in snapshot
    assert "Board value at empty position: 0" in snapshot
    assert "move 0: (2, 3) -> tile 12" in snapshot
    assert "move 1: (3, 2) -> tile 15" in snapshot
